from secrets import randbelow


def toint(b: bytes, nbytes: int) -> int:
  if len(b) != nbytes: raise ValueError(f"Should be exactly {nbytes} bytes")
  return int.from_bytes(b, "little")

def tobytes(x: int, nbytes: int) -> bytes:
  return x.to_bytes(nbytes, "little")


# Miller-Rabin witnesses: the first thirteen primes make the test deterministic
# below psi_13 = 3317044064679887385961981 (Sorenson and Webster). Larger n
# also get RANDOM_ROUNDS random witnesses, a composite then passes with
# probability under 4^-RANDOM_ROUNDS.
WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)
DETERMINISTIC_BELOW = 3317044064679887385961981
RANDOM_ROUNDS = 32

def is_prime(n: int) -> bool:
  """Miller-Rabin primality test"""
  if n < 2: return False
  for w in WITNESSES:
    if n % w == 0: return n == w
  witnesses = list(WITNESSES)
  if n >= DETERMINISTIC_BELOW:
    witnesses += [randbelow(n - 3) + 2 for _ in range(RANDOM_ROUNDS)]
  # n - 1 = 2^s * d with d odd
  d, s = n - 1, 0
  while not d & 1:
    d >>= 1
    s += 1
  for w in witnesses:
    x = pow(w, d, n)
    if x == 1 or x == n - 1: continue
    for _ in range(s - 1):
      x = x * x % n
      if x == n - 1: break
    else:
      return False
  return True
