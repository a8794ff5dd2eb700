import sys
from typing import NoReturn

import eots

T = "\x1B[1;44m"  # titlebar (white on blue)
H = "\x1B[1;37m"  # heading (bright white)
C = "\x1B[0;34m"  # command (dark blue)
F = "\x1B[1;34m"  # flag (light blue)
D = "\x1B[1;30m"  # dark / syntax markup
N = "\x1B[0m"     # normal color

usage = dict(
  keygen=f"{C}eots {F}keygen {D}[{F}-A{D}]{N} — create a new private key and its public key\n",
  pub=f"{C}eots {F}pub {N}seckey {D}—{N} show the public key of a private key\n",
  hash=f"{C}eots {F}hash {N}message text {D}—{N} SHA-256 digest of the text, for signing\n",
  sign=f"{C}eots {F}sign {N}seckey {D}[{F}-d {N}digest {D}|{F} -m {N}message{D}] [{F}-k {N}nonce{D}] [{F}-A{D}]{N}\n",
  verify=f"{C}eots {F}verify {N}pubkey {D}[{F}-d {N}digest {D}|{F} -m {N}message{D}]{N} r s\n",
  extract=f"""\
{C}eots {F}extract {N}r1 s1 r2 s2 {D}[{F}-d {N}digest1 {F}-d {N}digest2 {D}|{F} -m {N}msg1 {F}-m {N}msg2{D}] [{F}-A{D}]{N}
""",
  random=f"{C}eots {F}random {D}—{N} 32 random bytes in hex (nonce or digest)\n",
  demo=f"{C}eots {F}demo {D}—{N} show key extraction on nonce reuse\n",
  bench=f"{C}eots {F}bench {D}[{F}--rounds {N}100{D}] —{N} measure signing, verification and extraction\n",
)

usagetext = dict(
  sign=f"""\
Sign a 32-byte digest with a private key (both 64 hex characters). Instead of
a digest, message text may be given and it is hashed with SHA-256.

  {F}-d {N}digest         Digest to sign (64 hex characters)
  {F}-m {N}message        Message text to hash and sign
  {F}-k {N}nonce          Explicit nonce (64 hex characters)
  {F}-A{N}                Copy the signature (r||s) to clipboard

Without {F}-k{N} the nonce is SHA-256(seckey || digest), so signing the same
digest twice gives the same signature. Signing two different digests with
the same {F}-k{N} nonce reveals the private key to anyone who sees both.
""",
  verify=f"""\
Verify a signature given as r and s (64 hex characters each) or as a single
128 character r||s. Exits with status 0 if valid and 10 if not.

  {F}-d {N}digest         Digest that was signed
  {F}-m {N}message        Message text that was signed (hashed with SHA-256)
""",
  extract=f"""\
Recover the private key from two signatures that used the same nonce. The
signatures may also be given as r||s (128 hex characters each). Digests are
given in the same order as the signatures.

  {F}-d {N}digest         Digest of a signature (give twice)
  {F}-m {N}message        Message text of a signature (give twice)
  {F}-A{N}                Copy the recovered private key to clipboard
""",
)

cmdhelp = {k: f"{usage[k]}\n{usagetext.get(k, '')}".rstrip("\n") + "\n" for k in usage}

introduction = f"EOTS {eots.__version__} - Extractable one-time signatures on secp256k1"

introduction = f"""\
{T}{introduction:78}{N}
 💣  Reusing a nonce for two messages gives away your private key (by design)
"""

shorthelp = f"""\
{introduction}
{"".join(usage.values())}
Getting started: create a key with {F}keygen{N}, then {F}sign{N} messages with it. Try
{F}demo{N} to see what happens when a nonce is used twice.

  {F}--help --version{N}  Useful information. Help applies to subcommands too.
"""

allcommands = '\n\n'.join(cmdhelp.values())

fullhelp = f"""\
{introduction}
{allcommands}"""

def print_help(modehelp: str = None, error: str = None) -> NoReturn:
  stream = sys.stderr if error else sys.stdout
  if modehelp is None: stream.write(shorthelp)
  elif (h := cmdhelp.get(modehelp)): stream.write(h)
  else: stream.write(fullhelp)
  if error:
    stream.write(f"\n{error}\n")
    sys.exit(1)
  sys.exit(0)

def print_version() -> NoReturn:
  print(f"EOTS {eots.__version__}")
  sys.exit(0)
