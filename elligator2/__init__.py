# Elligator 2 direct map over Montgomery curves v^2 = u^3 + A u^2 + B u

# Based on code by Loup Vaillant and Andrew Moon (public domain, no warranties)
# https://github.com/LoupVaillant/Monocypher/blob/master/tests/gen/elligator.py

# Not constant time, the Monocypher C library should be preferred where
# side channels matter. Curve parameters are validated once when built and
# are immutable afterwards, the map itself is a pure function.

# Public symbols are imported here. Lower case names are functions and field
# types, upper case are curve parameter presets.

from .curves import CURVE25519, Fe25519
from .exceptions import FieldError, MapInvariantError, NotASquare, NotInvertible, ParameterError
from .field import fe, field, non_square, sqrtm1
from .legendre import Residuosity, classify, legendre
from .mapping import direct_map, direct_map_branching
from .params import CurveParams, build_curve_params
