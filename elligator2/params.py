from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Type, Union

from .exceptions import NotASquare, ParameterError
from .field import fe, field, sqrtm1
from .util import is_prime

Coefficient = Union[int, fe]


@dataclass(frozen=True)
class CurveParams:
  """
  Montgomery curve v^2 = u^3 + A u^2 + B u over GF(q), together with the
  non-square Z of the Elligator 2 map.

  Use build_curve_params() to create validated parameters. Constructing this
  class directly performs no checks at all.
  """
  q: int
  A: fe
  B: fe
  Z: fe

  @property
  def F(self) -> Type[fe]:
    """The field element type"""
    return type(self.A)

  @cached_property
  def A_half(self) -> fe:
    """A / 2, so that (-A/2, 0) is the image of the zero Legendre case"""
    return self.A / self.F(2)

  # Twist constants of the fast formulas by Loup Vaillant and Andrew Moon:
  # Zu = -Z * sqrt(-1) and Zv = sqrt(Zu). The direct map does not use them.
  @cached_property
  def Zu(self) -> fe:
    try:
      return -self.Z * sqrtm1(self.F)
    except NotASquare as e:
      raise ParameterError(f"No Zu on this field: {e}") from e

  @cached_property
  def Zv(self) -> fe:
    try:
      return self.Zu.sqrt
    except NotASquare as e:
      raise ParameterError(f"No Zv on this field: {e}") from e

  def curve(self, u: fe) -> fe:
    """The right hand side u^3 + A u^2 + B u of the curve equation"""
    return u**3 + self.A * u.sq + self.B * u

  def is_on_curve(self, u: fe, v: fe) -> bool:
    return v * v == self.curve(u)


def build_curve_params(q: int, A: Coefficient, B: Coefficient, Z: Coefficient) -> CurveParams:
  """
  Create Elligator 2 parameters for the curve v^2 = u^3 + A u^2 + B u over GF(q).
  - Coefficients may be given as int or as elements of field(q)

  :raises ParameterError: if the map would not be total over the field
  """
  if q < 3 or not q & 1 or not is_prime(q):
    raise ParameterError(f"The field characteristic {q} is not an odd prime")
  F = field(q)
  A, B, Z = (coerce(F, x, name) for x, name in ((A, "A"), (B, "B"), (Z, "Z")))
  params = CurveParams(q, A, B, Z)
  check_params(params)
  return params


def coerce(F: Type[fe], x: Coefficient, name: str) -> fe:
  if isinstance(x, int): return F(x)
  if type(x) is not F: raise ParameterError(f"{name}={x!r} is not an element of GF({F.p})")
  return x


def check_params(params: CurveParams) -> None:
  """Verify the preconditions under which every inverse and square root of the map exists."""
  A, B, Z = params.A, params.B, params.Z
  if A.p != params.q: raise ParameterError(f"Coefficients are not in GF({params.q})")
  if A.val == 0 or B.val == 0:
    raise ParameterError("A and B must be non-zero")
  if A.sq - B * type(A)(4) == A.zero:
    raise ParameterError("The curve is singular (A^2 = 4B)")
  if Z.is_square:
    raise ParameterError(f"Z={Z!r} is a square")
  # 1 + Z r^2 = 0 has a solution r exactly when -Z is a square (q = 3 mod 4)
  if (-Z).is_square:
    raise ParameterError(f"1 + Z r^2 vanishes for some r, -Z={-Z!r} is a square")
