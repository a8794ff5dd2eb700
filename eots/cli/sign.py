import sys

import pyperclip

from eots import util
from eots.elliptic import Signature, eots_sign, eots_verify, public_key
from eots.exceptions import CliArgError


def read_digests(args, count):
  """Digests from -d (hex) or -m (message text to hash)"""
  if args.digests and args.messages:
    raise CliArgError("Use either -d digest or -m message, not both")
  if args.messages:
    digests = [util.message_hash(m) for m in args.messages]
  else:
    names = ["digest"] if len(args.digests) == 1 else [f"digest {i + 1}" for i in range(len(args.digests))]
    digests = [util.hexdecode(name, d) for name, d in zip(names, args.digests)]
  if len(digests) != count:
    what = "a digest (-d) or a message (-m)" if count == 1 else f"{count} digests (-d) or messages (-m)"
    raise CliArgError(f"Argument error, expected {what}")
  return digests


def read_signatures(parts, count):
  """Signatures given as r s pairs or as r||s, in any mix"""
  parts, sigs = list(parts), []
  while parts and len(sigs) < count:
    num = "" if count == 1 else str(len(sigs) + 1)
    p = parts.pop(0)
    if util.is_hex(p, util.SIGLEN):
      sigs.append(Signature.from_bytes(util.hexdecode(f"signature {num}".rstrip(), p, util.SIGLEN)))
    elif parts:
      sigs.append(Signature(util.hexdecode(f"r{num}", p), util.hexdecode(f"s{num}", parts.pop(0))))
    else:
      break
  if parts or len(sigs) != count:
    raise CliArgError(f"Argument error, expected {count} signature(s) as r s or r||s")
  return sigs


def main_sign(args):
  if len(args.files) != 1:
    raise CliArgError("Argument error, give exactly one private key")
  sk = util.hexdecode("private key", args.files[0])
  digest, = read_digests(args, 1)
  nonce = util.hexdecode("nonce", args.nonce) if args.nonce else None
  if nonce is not None:
    sys.stderr.write(" ⚠️  Explicit nonce: signing another message with it reveals your private key\n")
  sig = eots_sign(sk, digest, nonce)
  print(f"r  {util.hexencode(sig.r)}")
  print(f"s  {util.hexencode(sig.s)}")
  print(f"Public key  {util.hexencode(public_key(sk))}")
  if args.paste:
    pyperclip.copy(str(sig))
    sys.stderr.write(" 📋 Signature r||s copied to clipboard\n")


def main_verify(args):
  if not args.files:
    raise CliArgError("Argument error, public key is required")
  pk = util.hexdecode("public key", args.files[0], util.PKLEN)
  digest, = read_digests(args, 1)
  sig, = read_signatures(args.files[1:], 1)
  if not eots_verify(pk, digest, sig):
    raise ValueError("Signature INVALID")
  print("Signature VALID")
