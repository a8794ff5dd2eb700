from time import perf_counter

from tqdm import tqdm

from eots import util
from eots.elliptic import eots_extract, eots_sign, eots_verify, generate_keypair


def main_bench(args):
  try:
    rounds = int(args.rounds)
  except ValueError:
    raise ValueError(f"Invalid number of rounds: {args.rounds}")
  if rounds < 1:
    raise ValueError("Invalid number of rounds, must be at least 1")
  sk, pk = generate_keypair()
  nonce = bytes.fromhex(util.random_hex32())
  signtotal = verifytotal = extracttotal = 0
  for _ in tqdm(range(rounds), ncols=78, unit='round', leave=False):
    h1 = bytes.fromhex(util.random_hex32())
    h2 = bytes.fromhex(util.random_hex32())
    t0 = perf_counter()
    sig1 = eots_sign(sk, h1, nonce)
    t1 = perf_counter()
    valid = eots_verify(pk, h1, sig1)
    t2 = perf_counter()
    sig2 = eots_sign(sk, h2, nonce)
    t3 = perf_counter()
    extracted = eots_extract(sig1, sig2, h1, h2)
    t4 = perf_counter()
    if not valid or extracted != sk:
      raise ValueError("Benchmark produced an incorrect result")
    signtotal += (t1 - t0) + (t3 - t2)
    verifytotal += t2 - t1
    extracttotal += t4 - t3

  print(f"Ran {rounds} rounds, each signing twice, verifying once and extracting once.\n")
  print(f"Signing    {2 * rounds / signtotal:8.0f} ops/s")
  print(f"Verifying  {rounds / verifytotal:8.0f} ops/s")
  print(f"Extracting {rounds / extracttotal:8.0f} ops/s")
