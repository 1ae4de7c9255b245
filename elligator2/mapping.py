# Elligator 2 direct map, see section 5 of
# https://www.shiftleft.org/papers/elligator/elligator.pdf
# and https://elligator.org/map
#
# Unlike the paper, curve coordinates are called (u, v) to follow
# established conventions. Thus, "v" in the paper is called "w" here.
#
# Both functions below compute the same map. direct_map is the preferred
# one, it does not branch on the Legendre symbol. direct_map_branching
# spells out the three cases and serves as its reference.
#
# Neither is constant time: Python integers are not, whatever the formula.

from contextlib import contextmanager
from typing import Iterator, Tuple, Union

from .exceptions import FieldError, MapInvariantError
from .field import fe
from .legendre import Residuosity, classify, legendre
from .params import CurveParams


@contextmanager
def invariant(what: str) -> Iterator[None]:
  """Escalate a missing inverse or square root into a fatal map failure."""
  try:
    yield
  except FieldError as e:
    raise MapInvariantError(f"{what}: {e} (invalid curve parameters?)") from e


def element(params: CurveParams, r: Union[int, fe]) -> fe:
  """The representative r as an element of the curve's field, ints are reduced mod q"""
  if isinstance(r, bool): raise TypeError(f"{r!r} is not a field element")
  if isinstance(r, int): return params.F(r)
  if type(r) is not params.F: raise TypeError(f"{r!r} is not an element of GF({params.q})")
  return r


def direct_map(params: CurveParams, r: Union[int, fe]) -> Tuple[fe, fe]:
  """
  Map a field element to the (u, v) coordinates of a curve point.

  From the paper:
  w = -A / (1 + Z r^2)
  e = chi(w^3 + A w^2 + B w)
  u = e*w - (1-e)*(A/2)
  v = -e * sqrt(u^3 + A u^2 + B u)

  :raises MapInvariantError: never for parameters from build_curve_params
  """
  r = element(params, r)
  one = params.F.one
  with invariant("1 + Z r^2 is not invertible"):
    w = -params.A / (one + params.Z * r.sq)
  e = legendre(params.curve(w), params)
  u = e*w - (one - e) * params.A_half
  # e^2 is 1, or 0 when e is: v is then zero without a square root to fail
  with invariant("No v coordinate for u"):
    v = -e * (params.curve(u) * e.sq).sqrt
  return u, v


def direct_map_branching(params: CurveParams, r: Union[int, fe]) -> Tuple[fe, fe]:
  """Same as direct_map, written as an explicit branch on the Legendre symbol."""
  r = element(params, r)
  with invariant("1 + Z r^2 is not invertible"):
    w = -params.A / (params.F.one + params.Z * r.sq)
  f = params.curve(w)
  kind = classify(f, params)
  if kind is Residuosity.ZERO:
    return -params.A_half, params.F.zero
  with invariant("No v coordinate for u"):
    if kind is Residuosity.RESIDUE:
      return w, -f.sqrt
    # The other candidate, g(u) recalculated at the new u
    u = -w - params.A
    return u, params.curve(u).sqrt
