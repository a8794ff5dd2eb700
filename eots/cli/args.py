import sys

from eots.cli.help import print_help, print_version


class Args:

  def __init__(self):
    self.mode = None
    self.files = []
    self.digests = []
    self.messages = []
    self.nonce = ""
    self.rounds = "100"
    self.paste = None
    self.debug = None


keygenargs = dict(
  paste='-A'.split(),
  debug='--debug'.split(),
)

signargs = dict(
  digests='-d --digest'.split(),
  messages='-m --message'.split(),
  nonce='-k --nonce'.split(),
  paste='-A'.split(),
  debug='--debug'.split(),
)

verifyargs = dict(
  digests='-d --digest'.split(),
  messages='-m --message'.split(),
  debug='--debug'.split(),
)

extractargs = dict(
  digests='-d --digest'.split(),
  messages='-m --message'.split(),
  paste='-A'.split(),
  debug='--debug'.split(),
)

benchargs = dict(
  rounds='--rounds'.split(),
  debug='--debug'.split(),
)

plainargs = dict(debug='--debug'.split(),)

def needhelp(av):
  """Check for -h and --help but not past --"""
  for a in av:
    if a == '--': return False
    if a.lower() in ('-h', '--help'): return True
  return False

def subcommand(arg):
  if arg in ('keygen', 'genkey'): return 'keygen', keygenargs
  if arg in ('pub', 'pubkey'): return 'pub', plainargs
  if arg in ('hash', ): return 'hash', plainargs
  if arg in ('sign', ): return 'sign', signargs
  if arg in ('verify', ): return 'verify', verifyargs
  if arg in ('extract', ): return 'extract', extractargs
  if arg in ('random', 'rand'): return 'random', plainargs
  if arg in ('demo', ): return 'demo', plainargs
  if arg in ('bench', 'benchmark'): return 'bench', benchargs
  if arg in ('help', ): return 'help', {}
  return None, {}

def argparse():
  # Custom parsing due to argparse module's limitations
  av = sys.argv[1:]
  if not av:
    print_help()

  if any(a.lower() in ('-v', '--version') for a in av):
    print_version()

  args = Args()
  args.mode, ad = subcommand(av[0])

  if args.mode == 'help' or needhelp(av):
    if args.mode == 'help' and len(av) == 2 and (mode := subcommand(av[1])[0]):
      print_help(mode)
    print_help(args.mode or "help")

  if args.mode is None:
    sys.stderr.write(' 💣  Invalid or missing command (keygen/sign/verify/extract/demo/help).\n')
    sys.exit(1)

  aiter = iter(av[1:])
  shortargs = [flag[1:] for switches in ad.values() for flag in switches if not flag.startswith("--")]
  for a in aiter:
    if a == '--':
      args.files += aiter
      break
    if not a.startswith('-') or a == '-':
      args.files.append(a)
      continue
    if a.startswith('--'):
      flags = [a.lower()]
    else:
      if falseargs := [f for f in a[1:] if f not in shortargs]:
        print_help(args.mode, f' 💣  Unknown argument: eots {args.mode} {a} (failing -{" -".join(falseargs)})')
      flags = [f'-{f}' for f in a[1:]]
    for flag in flags:
      argvar = next((k for k, v in ad.items() if flag in v), None)
      if argvar is None:
        print_help(args.mode, f' 💣  Unknown argument: eots {args.mode} {a}')
      var = getattr(args, argvar)
      if isinstance(var, bool) or var is None:
        setattr(args, argvar, True)
        continue
      if (value := next(aiter, None)) is None:
        print_help(args.mode, f' 💣  Argument parameter missing: eots {args.mode} {a} …')
      if isinstance(var, list):
        var.append(value)
      else:
        setattr(args, argvar, value)

  return args
