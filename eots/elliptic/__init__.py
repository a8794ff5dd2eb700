# A plain Python submodule for EOTS signatures over secp256k1

# Scalar arithmetic is done here in Python. Point operations are delegated to
# libsecp256k1 (coincurve), which is constant time for secret scalars, but
# the modular arithmetic here is not, and nothing zeroes buffers after use.

# Public symbols are imported here. Lower case constants are scalars,
# upper case are points.

from . import curve
from .curve import G
from .extract import eots_extract, recover_nonce
from .keys import generate_keypair, public_key, secret_scalar
from .scalar import inv, mod, n
from .sign import Signature, derive_nonce, eots_sign, eots_verify
from .util import shabytes, tobytes, toint
