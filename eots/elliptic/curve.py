# secp256k1 point operations, delegated to libsecp256k1 via coincurve.
#
# Points are coincurve.PublicKey objects, which cannot hold the point at
# infinity: any operation that would produce it raises ValueError. Scalars
# passed in here must be 1..n-1 for the same reason.
#
# The standard ECDSA verifier of the cryptography package (OpenSSL) is
# available for cross-checking, as it accepts high-S signatures unlike
# libsecp256k1's own verifier.

from coincurve import PublicKey
from cryptography.exceptions import InvalidSignature as BadSignatureError
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import Prehashed, encode_dss_signature

from .util import tobytes

# Compressed SEC1 encoding: parity prefix and x coordinate
PKLEN = 33

# Base point
G = PublicKey.from_secret(tobytes(1))


def base_mul(k: int) -> PublicKey:
  """k * G"""
  return PublicKey.from_secret(tobytes(k))

def mul(k: int, P: PublicKey) -> PublicKey:
  """k * P"""
  return P.multiply(tobytes(k))

def add(P: PublicKey, Q: PublicKey) -> PublicKey:
  """P + Q, raises ValueError if the sum is the point at infinity"""
  return PublicKey.combine_keys([P, Q])

def xcoord(P: PublicKey) -> int:
  return P.point()[0]

def encode(P: PublicKey) -> bytes:
  return P.format(compressed=True)

def decode(pk: bytes) -> PublicKey:
  """Parse a compressed public key (33 bytes)"""
  if len(pk) != PKLEN or pk[0] not in (2, 3):
    raise ValueError("Public key must be 33 bytes in compressed format")
  return PublicKey(bytes(pk))


def standard_verify(pk: bytes, digest: bytes, r: int, s: int) -> bool:
  """Verify (r, s) as an ordinary ECDSA signature over a SHA-256 digest."""
  try:
    key = ec.EllipticCurvePublicKey.from_encoded_point(ec.SECP256K1(), bytes(pk))
    key.verify(encode_dss_signature(r, s), bytes(digest), ec.ECDSA(Prehashed(hashes.SHA256())))
  except (ValueError, BadSignatureError):
    return False
  return True
