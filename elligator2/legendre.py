from __future__ import annotations

from enum import Enum

from .exceptions import ParameterError
from .field import fe
from .params import CurveParams


class Residuosity(Enum):
  """Quadratic character of a field element, valued as its Legendre symbol."""

  ZERO = 0
  RESIDUE = 1
  NON_RESIDUE = -1


def legendre(f: fe, params: CurveParams) -> fe:
  """
  Legendre symbol of f as a field element: zero, one or minus1.

  Computed by Euler's criterion f^((q-1)/2), where the exponent (q-1)/2 is
  exact because q is odd.

  :raises ParameterError: if q is not the characteristic or not a prime
  """
  if f.p != params.q: raise ParameterError(f"{f!r} is not an element of GF({params.q})")
  # The field type holds the same exponent precalculated as p2
  e = f.chi
  # Euler's criterion only ever gives -1, 0 or 1 modulo a prime
  if e.val not in (0, 1, e.p - 1):
    raise ParameterError(f"Legendre symbol {e!r} is not -1, 0 or 1, GF({params.q}) is not a prime field")
  return e


def classify(f: fe, params: CurveParams) -> Residuosity:
  """Legendre symbol of f as a three-way classification."""
  e = legendre(f, params)
  if e == f.zero: return Residuosity.ZERO
  return Residuosity.RESIDUE if e == f.one else Residuosity.NON_RESIDUE
