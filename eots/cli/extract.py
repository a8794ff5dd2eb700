import sys

import pyperclip

from eots import util
from eots.cli.sign import read_digests, read_signatures
from eots.elliptic import eots_extract, public_key, recover_nonce


def main_extract(args):
  sig1, sig2 = read_signatures(args.files, 2)
  h1, h2 = read_digests(args, 2)
  sk = eots_extract(sig1, sig2, h1, h2)
  k = recover_nonce(sig1, sig2, h1, h2)
  print(f"Private key  {util.hexencode(sk)}")
  print(f"Public key   {util.hexencode(public_key(sk))}")
  print(f"Nonce        {util.hexencode(k)}")
  if args.paste:
    pyperclip.copy(util.hexencode(sk))
    sys.stderr.write(" 📋 Private key copied to clipboard\n")
