from __future__ import annotations

from functools import cached_property, lru_cache
from typing import Dict, Optional, Type

from .exceptions import NotASquare, NotInvertible
from .util import tobytes, toint


class fe:
  """An element of the prime field GF(p), with p set by the subclass that field() creates"""
  p: int
  p2: int  # (p - 1) // 2, the Legendre exponent
  nbytes: int
  zero: fe
  one: fe
  minus1: fe

  def __init__(self, x: int): self.val = x % self.p
  def __hash__(self): return hash((self.p, self.val))
  def __int__(self): return self.val
  def __repr__(self): return value_name(self)
  def __str__(self): return bytes(self).hex()
  def __bytes__(self): return tobytes(self.val, self.nbytes)

  @classmethod
  def from_bytes(cls, b: bytes) -> fe:
    """Decode the canonical little endian encoding"""
    val = toint(b, cls.nbytes)
    if val >= cls.p: raise ValueError(f"Non-canonical encoding of an element mod {cls.p}")
    return cls(val)

  @classmethod
  def from_hex(cls, s: str) -> fe:
    """Decode a little endian hex string, the inverse of str()"""
    return cls.from_bytes(bytes.fromhex(s))

  def _of(self, o: fe) -> int:
    """The value of another element of the same field"""
    if type(o) is not type(self): raise TypeError(f"Cannot mix {self!r} with {o!r}")
    return o.val

  def __eq__(self, other):
    # Note: if we return NotImplemented, Python does object comparison and returns False
    if not isinstance(other, fe): raise TypeError(f"Cannot compare fe with {other!r}")
    return self.val == self._of(other)

  def __abs__(self): return -self if self.is_negative else self
  def __neg__(self): return type(self)(-self.val)
  def __add__(self, o: fe): return type(self)(self.val + self._of(o))
  def __sub__(self, o: fe): return type(self)(self.val - self._of(o))
  def __mul__(self, o: fe): return type(self)(self.val * self._of(o))

  def __truediv__(self, o: fe) -> fe:
    """Division mod p"""
    return self if o == self.one else self * o.inv

  def __pow__(self, s: int) -> fe:
    # Use faster cached .sq for x**2 because it is a very common operation
    if s == 2: return self.sq
    if s < 0: return self.inv**-s
    return type(self)(pow(self.val, s, self.p))

  @cached_property
  def inv(self) -> fe:
    if self.val == 0: raise NotInvertible(f"{self!r} has no inverse")
    try:
      return type(self)(pow(self.val, -1, self.p))
    except ValueError:
      # A non-zero non-unit, p is not prime
      raise NotInvertible(f"{self!r} has no inverse mod {self.p}") from None

  @cached_property
  def is_negative(self) -> bool: return self.val > self.p2

  # Legendre symbol (Euler's criterion):
  # -  0 if n is zero
  # -  1 if n is a non-zero square
  # - -1 if n is not a square
  # Only holds when p is an odd prime.
  @cached_property
  def chi(self) -> fe:
    """Legendre symbol"""
    return self**self.p2

  @cached_property
  def sq(self) -> fe:
    """Squared"""
    x = self * self
    x.is_square = True
    return x

  @cached_property
  def is_square(self) -> bool: return self.val == 0 or self.chi == self.one

  @cached_property
  def sqrt(self) -> fe:
    """The non-negative square root. Raises NotASquare otherwise."""
    if not self.is_square: raise NotASquare(f"{self!r} is not a square")
    if self.val == 0: return self
    p = self.p
    if p % 4 == 3:
      root = self**((p+1) // 4)
    elif p % 8 == 5:
      # (p+3)/8 is an integer, the result is a root of either n or -n
      root = self**((p+3) // 8)
      if root * root != self: root *= sqrtm1(type(self))
    else:
      root = tonelli_shanks(self)
    # Only fails when p is not prime
    if root * root != self: raise NotASquare(f"No square root of {self!r} mod {p}")
    # We then choose the non-negative square root, between 0 and (p-1)/2
    return abs(root)


def tonelli_shanks(n: fe) -> fe:
  """Square root of a non-zero square n, for any odd prime p"""
  F = type(n)
  # p - 1 = 2^s * t with t odd
  t, s = n.p - 1, 0
  while not t & 1:
    t >>= 1
    s += 1
  c = non_square(F)**t
  x = n**((t+1) // 2)
  b = n**t
  while b != F.one:
    # Least i with b^(2^i) == 1, always below s for a square mod a prime
    i, b2 = 0, b
    while b2 != F.one and i < s:
      b2 = b2.sq
      i += 1
    if i == s: raise NotASquare(f"{n!r} is not a square")
    for _ in range(s - i - 1):
      c = c.sq
    x *= c
    c = c.sq
    b *= c
    s = i
  return x


@lru_cache(maxsize=None)
def non_square(F: Type[fe]) -> fe:
  """The smallest quadratic non-residue of the field"""
  for c in range(2, F.p):
    if F(c).chi == F.minus1: return F(c)
  raise ValueError(f"No non-square found mod {F.p}")


@lru_cache(maxsize=None)
def sqrtm1(F: Type[fe]) -> fe:
  """The non-negative square root of -1, which exists only if p = 1 (mod 4)"""
  if F.p % 4 != 1: raise NotASquare(f"minus1 is not a square mod {F.p}")
  # z^((p-1)/4) squares to z^((p-1)/2) = -1 for any non-square z
  root = abs(non_square(F)**((F.p - 1) // 4))
  if root * root != F.minus1: raise NotASquare(f"No square root of minus1 mod {F.p}")
  return root


fields: Dict[int, Type[fe]] = {}

def field(p: int, name: Optional[str] = None) -> Type[fe]:
  """
  Create the element type of GF(p).
  - The same p always gives the same type, named on its first creation
  - Primality of p is not tested here, see params.build_curve_params
  """
  if p in fields: return fields[p]
  if p < 3 or not p & 1: raise ValueError(f"The field characteristic must be an odd prime, not {p}")
  F = type(name or "fe", (fe,), dict(
    p=p,
    p2=(p - 1) // 2,
    nbytes=(p.bit_length() + 7) // 8,
  ))
  F.zero, F.one, F.minus1 = F(0), F(1), F(-1)
  return fields.setdefault(p, F)


def value_name(s: fe) -> str:
  """Return names rather than fe(...) for the constants of the field"""
  for name in ("zero", "one", "minus1"):
    if s.val == getattr(s, name).val: return name
  return f"{type(s).__name__}({s.val})"
