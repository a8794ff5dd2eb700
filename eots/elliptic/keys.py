from secrets import token_bytes
from typing import Tuple

from ..exceptions import InvalidKey
from . import curve
from .scalar import in_range, n
from .util import toint


def generate_keypair() -> Tuple[bytes, bytes]:
  """Return a new random (private key, compressed public key) pair."""
  # Rejection sampling keeps the key uniform (no modulo bias)
  sk = token_bytes(32)
  while toint(sk) >= n:
    sk = token_bytes(32)
  return sk, curve.encode(curve.base_mul(toint(sk)))

def secret_scalar(sk: bytes) -> int:
  """Private key bytes as a scalar, checking the range 1..n-1."""
  x = toint(sk)
  if not in_range(x):
    raise InvalidKey("Private key must be between 1 and n-1")
  return x

def public_key(sk: bytes) -> bytes:
  """Compressed public key of a private key"""
  return curve.encode(curve.base_mul(secret_scalar(sk)))
