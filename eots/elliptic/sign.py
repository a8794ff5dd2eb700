from __future__ import annotations

from typing import NamedTuple, Optional

from ..exceptions import InvalidNonce, InvalidR, InvalidSignature
from . import curve
from .keys import secret_scalar
from .scalar import in_range, inv, mod, n
from .util import shabytes, tobytes, toint

# Extractable One-Time Signatures (EOTS) over secp256k1
#
# The signing equation is plain ECDSA:  s = k^-1 (h + r x) mod n
# with r the x coordinate of k G. Signing two different digests with the same
# key and nonce k yields the same r, and the two equations can be solved for
# both k and the private key x (see extract.py). The scheme exposes the nonce
# so that a signer equivocating on two messages gives away its key.
#
# The digest h is used as a 256-bit integer without truncation (the group
# order is also 256 bits), and s is not normalised to the lower half.


class Signature(NamedTuple):
  """EOTS signature as 32-byte big-endian r and s"""
  r: bytes
  s: bytes

  @staticmethod
  def from_bytes(b) -> Signature:
    """Split a 64-byte r || s"""
    if len(b) != 64: raise ValueError("Signature must be exactly 64 bytes")
    return Signature(bytes(b[:32]), bytes(b[32:]))

  @property
  def rint(self) -> int: return toint(self.r)

  @property
  def sint(self) -> int: return toint(self.s)

  def __bytes__(self): return self.r + self.s
  def __str__(self): return bytes(self).hex()


def derive_nonce(sk: bytes, digest: bytes) -> bytes:
  """Deterministic nonce SHA-256(sk || digest)"""
  return shabytes(bytes(sk) + bytes(digest))

def eots_sign(sk: bytes, digest: bytes, nonce: Optional[bytes] = None) -> Signature:
  """
  Sign a 32-byte digest.

  Without a nonce one is derived from the key and the digest, so that signing
  the same digest again gives the same signature. Passing the same nonce for
  two different digests exposes the private key to anyone holding both.

  :raises InvalidKey: private key not in 1..n-1
  :raises InvalidNonce: nonce not in 1..n-1
  :raises InvalidR: r came out zero
  :raises InvalidSignature: s came out zero
  """
  x = secret_scalar(sk)
  h = toint(digest)
  k = toint(derive_nonce(sk, digest) if nonce is None else nonce)
  if not in_range(k):
    raise InvalidNonce("Nonce must be between 1 and n-1")
  R = curve.base_mul(k)
  r = mod(curve.xcoord(R))
  if r == 0:
    raise InvalidR("Invalid signature: r is zero")
  s = mod(inv(k) * (h + r * x))
  if s == 0:
    raise InvalidSignature("Invalid signature: s is zero")
  return Signature(tobytes(r), tobytes(s))

def eots_verify(pk: bytes, digest: bytes, signature: Signature) -> bool:
  """Check that the signature matches the public key and digest. Never raises."""
  try:
    r, s = signature.rint, signature.sint
    if not (in_range(r) and in_range(s)):
      return False
    Q = curve.decode(pk)
    h = toint(digest)
    w = inv(s)
    u1, u2 = mod(h * w), mod(r * w)
    # u1 is zero only if h = 0 mod n, and then u1 G is the point at infinity
    P = curve.mul(u2, Q)
    if u1:
      P = curve.add(curve.base_mul(u1), P)
    return mod(curve.xcoord(P)) == r
  except (ValueError, TypeError):
    # Malformed input or the result was the point at infinity
    return False
