__version__ = "0.1.0"

from eots.elliptic import Signature, eots_extract, eots_sign, eots_verify, generate_keypair, public_key
from eots.exceptions import (
  DegenerateSignatures, EOTSError, IdenticalSignatures, InvalidKey, InvalidNonce, InvalidR, InvalidSignature,
  MalformedInputError, NoInverse, NonceMismatch
)
