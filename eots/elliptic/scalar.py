from ..exceptions import NoInverse

# secp256k1 group order (prime)
n = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141


def mod(a: int, m: int = n) -> int:
  """Reduce a into [0, m), also for negative a."""
  # Python's % already floors towards the divisor sign
  return a % m

def inv(a: int, m: int = n) -> int:
  """Modular inverse by the extended Euclidean algorithm."""
  a = mod(a, m)
  old_r, r = a, m
  old_s, s = 1, 0
  while r:
    quotient = old_r // r
    old_r, r = r, old_r - quotient * r
    old_s, s = s, old_s - quotient * s
  if old_r != 1:
    raise NoInverse(f"No inverse of {a:#x} modulo the group order")
  return mod(old_s, m)

def in_range(x: int) -> bool:
  """A valid non-zero scalar 1..n-1"""
  return 0 < x < n
