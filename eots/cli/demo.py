from eots import util
from eots.elliptic import curve, eots_extract, eots_sign, eots_verify, generate_keypair
from eots.exceptions import NonceMismatch

H = "\x1B[1;37m"  # heading (bright white)
N = "\x1B[0m"     # normal color


def demo_nonce_reuse() -> bool:
  """Sign two messages with one nonce and recover the key from them."""
  print(f"{H}EOTS nonce reuse{N}\n")
  sk, pk = generate_keypair()
  print(f"1. Private key  {sk.hex()}\n   Public key   {pk.hex()}\n")

  nonce = bytes.fromhex(util.random_hex32())
  h1 = bytes.fromhex(util.random_hex32())
  h2 = bytes.fromhex(util.random_hex32())
  print(f"2. One nonce for two messages\n   Nonce     {nonce.hex()}\n   Digest 1  {h1.hex()}\n   Digest 2  {h2.hex()}\n")

  sig1 = eots_sign(sk, h1, nonce)
  sig2 = eots_sign(sk, h2, nonce)
  print(f"3. Signatures\n   1: r={sig1.r.hex()}\n      s={sig1.s.hex()}\n   2: r={sig2.r.hex()}\n      s={sig2.s.hex()}\n")

  valid = eots_verify(pk, h1, sig1) and eots_verify(pk, h2, sig2)
  standard = curve.standard_verify(pk, h1, sig1.rint, sig1.sint) and curve.standard_verify(pk, h2, sig2.rint, sig2.sint)
  print(f"4. Both valid: {valid}  (as standard ECDSA: {standard})\n")

  extracted = eots_extract(sig1, sig2, h1, h2)
  match = extracted == sk
  print(f"5. Extracted key  {extracted.hex()}\n   Match: {'✅ YES' if match else '❌ NO'}\n")
  return match


def demo_proper_usage() -> bool:
  """Deterministic nonces differ per message, so nothing can be extracted."""
  print(f"{H}EOTS with unique nonces{N}\n")
  sk, pk = generate_keypair()
  sigs = []
  for i in range(3):
    h = bytes.fromhex(util.random_hex32())
    sig = eots_sign(sk, h)
    print(f"{i + 1}. Digest {h.hex()}\n   r={sig.r.hex()}\n   s={sig.s.hex()}\n   Valid: {eots_verify(pk, h, sig)}")
    sigs.append((sig, h))
  (sig1, h1), (sig2, h2) = sigs[:2]
  try:
    eots_extract(sig1, sig2, h1, h2)
  except NonceMismatch as e:
    print(f"\n ✅ Cannot extract: {e}\n")
    return True
  print("\n ❌ Private key extracted from unique nonces\n")
  return False


def main_demo(args):
  if not (demo_nonce_reuse() and demo_proper_usage()):
    raise ValueError("Demonstration did not give the expected results")
