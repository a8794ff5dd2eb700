from hashlib import sha256
from secrets import token_bytes

import pytest
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import Prehashed, decode_dss_signature
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from eots.elliptic import *
from eots.exceptions import *

# Compressed generator point and x coordinate of 2 G
G_HEX = "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
G2X = 0xC6047F9441ED7D6D3045406E95C07CD85C778E4B8CEF3CA7ABAC09B95C709EE5


def random_digest():
  return token_bytes(32)


def test_scalar():
  assert n == 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
  assert mod(-1) == n - 1
  assert mod(n) == 0
  assert mod(-5, 7) == 2
  assert inv(1) == 1
  assert inv(2) * 2 % n == 1
  assert inv(-2) == n - inv(2)
  assert inv(3, 7) == 5

  x = toint(token_bytes(32)) % (n - 1) + 1
  assert inv(x) * x % n == 1
  assert inv(inv(x)) == x
  assert inv(x) == pow(x, -1, n)

  for bad in (0, n, -n):
    with pytest.raises(NoInverse):
      inv(bad)
  with pytest.raises(ValueError) as exc:
    inv(6, 9)
  assert "No inverse" in str(exc.value)


def test_codec():
  assert toint(tobytes(1)) == 1
  assert tobytes(1) == bytes(31) + b"\x01"
  assert toint(b"\x01" + bytes(31)) == 1 << 248
  assert toint(12345) == 12345
  assert shabytes(b"a") == sha256(b"a").digest()
  with pytest.raises(ValueError) as exc:
    toint(bytes(31))
  assert "exactly 32 bytes" in str(exc.value)


def test_curve():
  assert curve.encode(G).hex() == G_HEX
  assert curve.xcoord(curve.base_mul(2)) == G2X
  assert curve.encode(curve.add(G, G)) == curve.encode(curve.base_mul(2))
  assert curve.encode(curve.mul(3, G)) == curve.encode(curve.base_mul(3))
  assert curve.encode(curve.decode(bytes.fromhex(G_HEX))).hex() == G_HEX
  with pytest.raises(ValueError):
    curve.decode(bytes.fromhex(G_HEX)[1:])
  with pytest.raises(ValueError):
    curve.decode(b"\x04" + bytes.fromhex(G_HEX)[1:])
  with pytest.raises(ValueError):
    curve.add(G, curve.base_mul(n - 1))  # Point at infinity


def test_keypair(mocker):
  sk, pk = generate_keypair()
  assert len(sk) == 32
  assert len(pk) == 33
  assert pk[0] in (2, 3)
  assert 0 < toint(sk) < n
  assert public_key(sk) == pk
  assert generate_keypair()[0] != sk

  # Rejection sampling redraws values not below the group order
  token = mocker.patch("eots.elliptic.keys.token_bytes", side_effect=[b"\xff" * 32, tobytes(n), tobytes(1)])
  sk, pk = generate_keypair()
  assert token.call_count == 3
  assert sk == tobytes(1)
  assert pk.hex() == G_HEX


def test_public_key_matches_cryptography():
  sk, pk = generate_keypair()
  key = ec.derive_private_key(toint(sk), ec.SECP256K1())
  assert key.public_key().public_bytes(Encoding.X962, PublicFormat.CompressedPoint) == pk

  for bad in (bytes(32), tobytes(n)):
    with pytest.raises(InvalidKey):
      public_key(bad)


def test_sign_verify():
  sk, pk = generate_keypair()
  h1, h2 = random_digest(), random_digest()
  sig1 = eots_sign(sk, h1)
  sig2 = eots_sign(sk, h2)
  assert len(sig1.r) == len(sig1.s) == 32
  assert eots_verify(pk, h1, sig1)
  assert eots_verify(pk, h2, sig2)
  assert not eots_verify(pk, h2, sig1)
  assert not eots_verify(pk, h1, sig2)
  assert not eots_verify(generate_keypair()[1], h1, sig1)

  # Deterministic nonces: same digest gives the same signature
  assert eots_sign(sk, h1) == sig1
  assert sig1.r != sig2.r
  assert eots_sign(sk, h1, derive_nonce(sk, h1)) == sig1

  # Every EOTS signature is a standard ECDSA signature
  assert curve.standard_verify(pk, h1, sig1.rint, sig1.sint)
  assert not curve.standard_verify(pk, h2, sig1.rint, sig1.sint)


def test_verify_cryptography_signature():
  key = ec.generate_private_key(ec.SECP256K1())
  pk = key.public_key().public_bytes(Encoding.X962, PublicFormat.CompressedPoint)
  digest = sha256(b"test message").digest()
  r, s = decode_dss_signature(key.sign(digest, ec.ECDSA(Prehashed(hashes.SHA256()))))
  sig = Signature(tobytes(r), tobytes(s))
  assert eots_verify(pk, digest, sig)
  assert not eots_verify(pk, sha256(b"Test message").digest(), sig)


def test_digest_edge_values():
  sk, pk = generate_keypair()
  # Digests of zero and of n are both 0 mod n (no u1 G term in verification)
  for h in (bytes(32), tobytes(n), b"\xff" * 32):
    sig = eots_sign(sk, h)
    assert eots_verify(pk, h, sig)


def test_verify_rejects_malformed():
  sk, pk = generate_keypair()
  h = random_digest()
  sig = eots_sign(sk, h)
  r, s = sig
  for bad in (
    Signature(bytes(32), s),
    Signature(r, bytes(32)),
    Signature(tobytes(n), s),
    Signature(r, tobytes(n)),
    Signature(r[1:], s),
    Signature(tobytes(1), tobytes(1)),
  ):
    assert not eots_verify(pk, h, bad)
  # Public key formats
  assert not eots_verify(pk[1:], h, sig)
  assert not eots_verify(b"\x04" + pk[1:], h, sig)
  assert not eots_verify(b"\x02" + b"\xff" * 32, h, sig)
  assert not eots_verify(b"", h, sig)
  # Digest and signature types
  assert not eots_verify(pk, h[1:], sig)
  assert not eots_verify(pk, h.hex()[:32], sig)


def test_verify_never_fails_open(mocker):
  sk, pk = generate_keypair()
  h = random_digest()
  sig = eots_sign(sk, h)
  mocker.patch("eots.elliptic.curve.mul", side_effect=ValueError("library failure"))
  assert not eots_verify(pk, h, sig)


def test_sign_errors():
  sk = generate_keypair()[0]
  h = random_digest()
  for bad in (bytes(32), tobytes(n), b"\xff" * 32):
    with pytest.raises(InvalidNonce) as exc:
      eots_sign(sk, h, bad)
    assert "Nonce" in str(exc.value)
    with pytest.raises(InvalidKey):
      eots_sign(bad, h)
  with pytest.raises(ValueError):
    eots_sign(sk, h[1:])
  # All signing errors are ValueErrors
  assert issubclass(InvalidNonce, ArithmeticDegeneracy)
  assert issubclass(InvalidR, EOTSError)
  assert issubclass(InvalidSignature, ValueError)


def test_sign_degenerate(mocker):
  sk, nonce = tobytes(1), tobytes(2)
  r = eots_sign(sk, random_digest(), nonce).rint
  assert r == G2X
  # h = -r x makes s = k^-1 (h + r x) zero
  with pytest.raises(InvalidSignature) as exc:
    eots_sign(sk, tobytes(mod(-r * 1)), nonce)
  assert "s is zero" in str(exc.value)
  # Other digests with the same nonce still sign
  assert eots_sign(sk, tobytes(mod(-r + 1)), nonce).rint == r

  # R.x = n reduces to r = 0
  mocker.patch("eots.elliptic.curve.xcoord", return_value=n)
  with pytest.raises(InvalidR) as exc:
    eots_sign(sk, random_digest(), nonce)
  assert "r is zero" in str(exc.value)


def test_signature_type():
  sig = eots_sign(generate_keypair()[0], random_digest())
  assert len(bytes(sig)) == 64
  assert str(sig) == sig.r.hex() + sig.s.hex()
  assert Signature.from_bytes(bytes(sig)) == sig
  assert sig.rint == toint(sig.r)
  r, s = sig
  assert (r, s) == (sig.r, sig.s)
  with pytest.raises(ValueError) as exc:
    Signature.from_bytes(bytes(63))
  assert "64 bytes" in str(exc.value)


def test_known_vector():
  """Key 1 and nonce 2 on the digests of "" and "a" """
  sk = tobytes(1)
  nonce = tobytes(2)
  h1 = sha256(b"").digest()
  h2 = sha256(b"a").digest()
  sig1 = eots_sign(sk, h1, nonce)
  assert eots_sign(sk, h1, nonce) == sig1
  assert sig1.rint == G2X
  assert sig1.sint == inv(2) * (toint(h1) + G2X) % n
  sig2 = eots_sign(sk, h2, nonce)
  assert sig2.r == sig1.r
  assert sig2.s != sig1.s
  assert eots_verify(bytes.fromhex(G_HEX), h2, sig2)
  assert eots_extract(sig1, sig2, h1, h2) == sk
  assert recover_nonce(sig1, sig2, h1, h2) == nonce


def test_extract():
  for _ in range(5):
    sk, pk = generate_keypair()
    nonce = token_bytes(32)
    h1, h2 = random_digest(), random_digest()
    sig1 = eots_sign(sk, h1, nonce)
    sig2 = eots_sign(sk, h2, nonce)
    assert eots_extract(sig1, sig2, h1, h2) == sk
    assert eots_extract(sig2, sig1, h2, h1) == sk
    assert recover_nonce(sig1, sig2, h1, h2) == tobytes(toint(nonce) % n)
    assert public_key(eots_extract(sig1, sig2, h1, h2)) == pk


def test_extract_errors():
  sk = generate_keypair()[0]
  h1, h2 = random_digest(), random_digest()

  # Different nonces
  sig1 = eots_sign(sk, h1, token_bytes(32))
  sig2 = eots_sign(sk, h2, token_bytes(32))
  with pytest.raises(NonceMismatch) as exc:
    eots_extract(sig1, sig2, h1, h2)
  assert "do not share a nonce" in str(exc.value)
  # Deterministic nonces differ for different digests
  with pytest.raises(NonceMismatch):
    eots_extract(eots_sign(sk, h1), eots_sign(sk, h2), h1, h2)

  # Same signature twice
  with pytest.raises(IdenticalSignatures) as exc:
    eots_extract(sig1, sig1, h1, h1)
  assert "identical" in str(exc.value)

  # Equal only modulo n
  r = sig1.r
  with pytest.raises(DegenerateSignatures):
    eots_extract(Signature(r, tobytes(5)), Signature(r, tobytes(5 + n)), h1, h2)

  # Shared r of zero cannot be divided by
  with pytest.raises(NoInverse) as exc:
    eots_extract(Signature(bytes(32), tobytes(5)), Signature(bytes(32), tobytes(7)), h1, h2)
  assert "No inverse of 0x0" in str(exc.value)

  # Extraction errors are distinct
  assert not issubclass(NonceMismatch, IdenticalSignatures)
  assert issubclass(DegenerateSignatures, ExtractionError)
