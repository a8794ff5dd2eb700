from typing import Tuple

from ..exceptions import DegenerateSignatures, IdenticalSignatures, NonceMismatch
from .scalar import inv, mod
from .sign import Signature
from .util import tobytes, toint

# Nonce reuse key recovery. For signatures i = 1, 2 sharing the nonce k:
#   s_i k = h_i + r x  (mod n)
# Subtracting gives k = (h1 - h2) / (s1 - s2), and then x = (s1 k - h1) / r.


def _solve(sig1: Signature, sig2: Signature, hash1: bytes, hash2: bytes) -> Tuple[int, int]:
  r1, s1 = sig1.rint, sig1.sint
  r2, s2 = sig2.rint, sig2.sint
  h1, h2 = toint(hash1), toint(hash2)
  if r1 != r2:
    raise NonceMismatch("Signatures do not share a nonce (r values are different)")
  if s1 == s2:
    raise IdenticalSignatures("Signatures are identical")
  sdiff = mod(s1 - s2)
  if sdiff == 0:
    raise DegenerateSignatures("Cannot extract private key: s1 equals s2 modulo n")
  hdiff = mod(h1 - h2)
  k = mod(hdiff * inv(sdiff))
  x = mod((s1 * k - h1) * inv(r1))
  return k, x

def eots_extract(sig1: Signature, sig2: Signature, hash1: bytes, hash2: bytes) -> bytes:
  """
  Recover the private key from two signatures made with the same nonce.

  :raises NonceMismatch: r values differ, the nonces were not the same
  :raises IdenticalSignatures: s values are equal
  :raises DegenerateSignatures: s values are equal modulo n
  :raises NoInverse: the shared r is zero
  """
  return tobytes(_solve(sig1, sig2, hash1, hash2)[1])

def recover_nonce(sig1: Signature, sig2: Signature, hash1: bytes, hash2: bytes) -> bytes:
  """The shared nonce k of two signatures, under the same conditions as eots_extract."""
  return tobytes(_solve(sig1, sig2, hash1, hash2)[0])
