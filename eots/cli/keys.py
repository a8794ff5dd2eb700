import sys

import pyperclip

from eots import util
from eots.elliptic import generate_keypair, public_key


def main_keygen(args):
  sk, pk = generate_keypair()
  print(f"Private key  {util.hexencode(sk)}")
  print(f"Public key   {util.hexencode(pk)}")
  if args.paste:
    pyperclip.copy(util.hexencode(sk))
    sys.stderr.write(" 📋 Private key copied to clipboard\n")


def main_pub(args):
  if len(args.files) != 1:
    raise ValueError("Argument error, give exactly one private key")
  sk = util.hexdecode("private key", args.files[0])
  print(util.hexencode(public_key(sk)))


def main_hash(args):
  if not args.files:
    raise ValueError("Argument error, message text is required")
  print(util.hexencode(util.message_hash(" ".join(args.files))))


def main_random(args):
  print(util.random_hex32())
