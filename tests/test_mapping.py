from secrets import randbelow

import pytest

from elligator2 import *

F = Fe25519
P = CURVE25519

# Test vectors from https://elligator.org/vectors/
VECTOR_R = "66665895c5bc6e44ba8d65fd9307092e3244bf2c18877832bd568cb3a2d38a12"
VECTOR_U = "04d44290d13100b2c25290c9343d70c12ed4813487a07ac1176daa5925e7975e"
VECTOR_V = "c35aa4226513c49a3c12b48d47f7e176e64c122345cad87c4e3ec9a72c828900"

SMALL = [(13, 2, 2, 2), (17, 3, 1, 3), (29, 6, 1, 2), (41, 7, 3, 3), (97, 5, 2, 5)]


def invsqrt(x: fe):
  """1/sqrt(x) for p = 5 (mod 8), the sign is not guaranteed"""
  isr = x**((x.p - 5) // 8)
  quartic = x * isr.sq
  if quartic == x.minus1 or quartic == -sqrtm1(type(x)):
    isr *= sqrtm1(type(x))
  return isr, quartic == x.one or quartic == x.minus1


def fast_hash_to_curve(params: CurveParams, r: fe):
  """Independent formulation with a single exponentiation, by Loup Vaillant and Andrew Moon"""
  A, one = params.A, params.F.one
  t1 = r**2 * params.Z  # r1
  u = t1 + one  # r2
  t2 = u**2
  t3 = (A**2 * t1 - t2) * A  # numerator
  t1 = t2 * u  # denominator
  t1, is_square = invsqrt(t3 * t1)
  u = r**2 * params.Zu
  v = r * params.Zv
  if is_square:
    u, v = one, one
  v *= t3 * t1
  u *= -A * t3 * t2 * t1**2
  if is_square != v.is_negative:  # XOR
    v = -v
  return u, v


def test_vector():
  r = F.from_hex(VECTOR_R)
  u, v = direct_map(P, r)
  assert str(u) == VECTOR_U
  assert str(v) == VECTOR_V
  assert (u, v) == (F.from_hex(VECTOR_U), F.from_hex(VECTOR_V))
  assert direct_map_branching(P, r) == (u, v)
  assert P.is_on_curve(u, v)


def test_zero_representative():
  # w = -A and f(w) = -A, whose Legendre symbol is -1 on Curve25519, so r = 0
  # lands on u = -w - A = 0 rather than on the zero image (-A/2, 0)
  assert legendre(-P.A, P) == F.minus1
  assert direct_map(P, F.zero) == (F.zero, F.zero)
  assert direct_map_branching(P, F.zero) == (F.zero, F.zero)
  assert direct_map(P, 0) == (F.zero, F.zero)
  # Representatives r and -r give the same point
  r = F.from_hex(VECTOR_R)
  assert direct_map(P, -r) == direct_map(P, r)


def test_zero_image():
  # B is not a square and A^2 - 4B is, so w^3 + A w^2 + B w = 0 is reached (w = 7 at r = 2)
  params = build_curve_params(13, 2, 2, 2)
  G = params.F
  assert params.curve(G(7)) == G.zero
  assert direct_map(params, 2) == (G(12), G.zero)
  assert direct_map_branching(params, 2) == (G(12), G.zero)
  assert direct_map(params, 2) == (-params.A_half, G.zero)


@pytest.mark.parametrize("q, A, B, Z", SMALL)
def test_exhaustive_small(q, A, B, Z):
  """Every representative of small fields: both forms agree and produce curve points"""
  params = build_curve_params(q, A, B, Z)
  G = params.F
  for r in range(q):
    u, v = direct_map(params, G(r))
    assert direct_map_branching(params, G(r)) == (u, v)
    assert params.is_on_curve(u, v) or (u, v) == (-params.A_half, G.zero)
    # v is never negative on the non-residue side and never positive on the residue side
    w = -params.A / (G.one + params.Z * G(r).sq)
    kind = classify(params.curve(w), params)
    if kind is Residuosity.RESIDUE:
      assert u == w and (v.is_negative or v == G.zero)
    if kind is Residuosity.NON_RESIDUE:
      assert u == -w - params.A and not v.is_negative


def test_random_curve25519():
  for _ in range(100):
    r = F(randbelow(F.p))
    u, v = direct_map(P, r)
    assert P.is_on_curve(u, v)
    assert direct_map_branching(P, r) == (u, v)
    assert fast_hash_to_curve(P, r) == (u, v)
    # No hidden state
    assert direct_map(P, r) == (u, v)


def test_fast_formulation_agrees():
  for r in (F.zero, F.one, F(2), F.from_hex(VECTOR_R)):
    assert fast_hash_to_curve(P, r) == direct_map(P, r)


def test_foreign_element():
  with pytest.raises(TypeError):
    direct_map(P, field(13)(2))
  with pytest.raises(TypeError):
    direct_map_branching(P, field(13)(2))
  with pytest.raises(TypeError):
    direct_map(P, True)


@pytest.mark.parametrize("dmap", [direct_map, direct_map_branching])
def test_invariant_violations(dmap):
  # Z = 3 is a square mod 13, only constructible by bypassing validation
  G = field(13)
  params = CurveParams(13, G(3), G(1), G(3))

  # 1 + 3 * 2^2 = 13 = 0 has no inverse
  with pytest.raises(MapInvariantError) as exc:
    dmap(params, G(2))
  assert isinstance(exc.value.__cause__, NotInvertible)

  # At r = 1 neither candidate u has a v coordinate
  with pytest.raises(MapInvariantError) as exc:
    dmap(params, G(1))
  assert isinstance(exc.value.__cause__, NotASquare)


@pytest.mark.parametrize("dmap", [direct_map, direct_map_branching])
def test_composite_modulus(dmap):
  """Out-of-contract moduli fail loudly with the map's own errors or still give curve points"""
  # Strong pseudoprime to the bases 2 to 37
  psi12 = 318665857834031151167461
  G = field(psi12)
  params = CurveParams(psi12, G(3), G(1), G(2))
  for r in range(8):
    try:
      u, v = dmap(params, r)
    except (ParameterError, MapInvariantError):
      continue
    assert params.is_on_curve(u, v) or (u, v) == (-params.A_half, G.zero)

  G = field(15)
  params = CurveParams(15, G(1), G(1), G(2))
  # 1 + 2 * 1^2 = 3 is not a unit mod 15
  with pytest.raises(MapInvariantError) as exc:
    dmap(params, 1)
  assert isinstance(exc.value.__cause__, NotInvertible)
  # Euler's criterion gives 3^7 = 12 mod 15
  with pytest.raises(ParameterError):
    legendre(G(3), params)
  for r in range(15):
    try:
      u, v = dmap(params, r)
    except (ParameterError, MapInvariantError):
      continue
    assert params.is_on_curve(u, v) or (u, v) == (-params.A_half, G.zero)
