import sys
from typing import NoReturn

import colorama

from eots.cli.args import argparse
from eots.cli.bench import main_bench
from eots.cli.demo import main_demo
from eots.cli.extract import main_extract
from eots.cli.keys import main_hash, main_keygen, main_pub, main_random
from eots.cli.sign import main_sign, main_verify

modes = {
  "keygen": main_keygen,
  "pub": main_pub,
  "hash": main_hash,
  "sign": main_sign,
  "verify": main_verify,
  "extract": main_extract,
  "random": main_random,
  "demo": main_demo,
  "bench": main_bench,
}


def main() -> NoReturn:
  """
  The main CLI entry point.

  Consider calling eots.elliptic functions directly if you use from Python code.

  System exit codes:
  * 0 The requested function was completed successfully
  * 1 CLI argument error
  * 2 Interrupted
  * 3 I/O error (broken pipe)
  * 10 Invalid signature, malformed input or any other expected error

  :raises SystemExit: on normal exit or any expected error, including KeyboardInterrupt
  :raises Exception: on unexpected error (report a bug), or on any error with `--debug`
  """
  colorama.init()
  # CLI argument processing
  args = argparse()

  # Run the mode-specific main function
  if args.debug:
    modes[args.mode](args)  # --debug makes us not catch errors
    sys.exit(0)
  try:
    modes[args.mode](args)  # Normal run
  except ValueError as e:
    sys.stderr.write(f"Error: {e}\n")
    sys.exit(10)
  except BrokenPipeError:
    sys.stderr.write('I/O error (broken pipe)\n')
    sys.exit(3)
  except KeyboardInterrupt:
    sys.stderr.write("Interrupted.\n")
    sys.exit(2)
  sys.exit(0)

if __name__ == "__main__":
  main()
