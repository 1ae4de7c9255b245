from .field import field
from .params import build_curve_params

# Curve25519: v^2 = u^3 + 486662 u^2 + u over GF(2^255 - 19)
p25519 = 2**255 - 19
Fe25519 = field(p25519, "Fe25519")

# Arbitrary non square, typically chosen to minimise computation.
# 2 and sqrt(-1) both work fairly well, but 2 seems to be more popular.
# We stick to 2 for compatibility with Monocypher and elligator.org.
CURVE25519 = build_curve_params(p25519, 486662, 1, 2)
