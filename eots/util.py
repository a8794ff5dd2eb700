import re
import unicodedata
from secrets import token_bytes

from eots.exceptions import MalformedInputError
from eots.elliptic.util import shabytes

# Sizes of the external representations in bytes
KEYLEN = 32  # private key, digest, nonce, r, s
PKLEN = 33  # compressed public key
SIGLEN = 64  # r || s

_hexre = re.compile("^[0-9a-fA-F]*$")


def hexdecode(field: str, value: str, size: int = KEYLEN) -> bytes:
  """Decode exactly size bytes of hex, naming the field on error."""
  value = value.strip()
  if value[:2].lower() == "0x":
    value = value[2:]
  if not _hexre.match(value):
    raise MalformedInputError(field, 2 * size, " (non-hex characters found)")
  if len(value) != 2 * size:
    raise MalformedInputError(field, 2 * size, f" (got {len(value)})")
  return bytes.fromhex(value)


def hexencode(data: bytes) -> str:
  return bytes(data).hex()


def is_hex(value: str, size: int = KEYLEN) -> bool:
  try:
    hexdecode("value", value, size)
  except MalformedInputError:
    return False
  return True


def random_hex32() -> str:
  """Random 32 bytes in hex, usable as a nonce, a digest or (mostly) a private key."""
  return token_bytes(KEYLEN).hex()


def encode(s: str) -> bytes:
  """Unicode-normalizing UTF-8 encode."""
  return unicodedata.normalize("NFKC", s.lstrip("\uFEFF")).encode()


def message_hash(text: str) -> bytes:
  """SHA-256 digest of message text"""
  return shabytes(encode(text))
