class FieldError(ArithmeticError):
  """A field operation has no result for its operand"""

class NotInvertible(FieldError, ZeroDivisionError):
  """Zero has no multiplicative inverse"""

class NotASquare(FieldError, ValueError):
  """The element is not a quadratic residue, so it has no square root"""

class ParameterError(ValueError):
  """Curve parameters do not satisfy the Elligator 2 preconditions"""

class MapInvariantError(RuntimeError):
  """An inverse or square root that must exist for valid parameters did not"""
