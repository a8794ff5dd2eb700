class EOTSError(ValueError):
  """Any expected failure of key, signature or extraction handling"""

class MalformedInputError(EOTSError):
  """Hex input of wrong length or with invalid characters"""
  def __init__(self, field: str, expected: int, got: str = ""):
    self.field = field
    self.expected = expected
    super().__init__(f"Invalid {field}: must be {expected} hex characters{got}")

class InvalidKey(EOTSError):
  """Private key is zero or not below the group order"""

class ArithmeticDegeneracy(EOTSError):
  """A scalar came out as zero or out of range during signing"""

class NoInverse(ArithmeticDegeneracy):
  """Modular inverse does not exist (value is 0 mod n)"""

class InvalidNonce(ArithmeticDegeneracy):
  """Nonce is zero or not below the group order"""

class InvalidR(ArithmeticDegeneracy):
  """r = (k G).x mod n came out zero"""

class InvalidSignature(ArithmeticDegeneracy):
  """s came out zero"""

class ExtractionError(EOTSError):
  """Two signatures cannot be used to recover the key"""

class NonceMismatch(ExtractionError):
  """Signatures have different r and thus did not share a nonce"""

class IdenticalSignatures(ExtractionError):
  """Both signatures have the same s"""

class DegenerateSignatures(ExtractionError):
  """s1 - s2 is zero modulo the group order"""

class CliArgError(ValueError):
  """Invalid CLI argument"""
