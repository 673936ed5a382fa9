"""Scalar helpers shared by the vector, matrix and quaternion types."""

PI = 3.1415926535
TWO_PI = PI * 2.0
PI_OVER_2 = PI / 2.0

DEFAULT_EPSILON = 0.001


def to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * PI / 180.0


def to_degrees(radians: float) -> float:
    """Convert an angle in radians to degrees."""
    return radians * 180.0 / PI


def clamp(value, lower, upper):
    """Limit ``value`` to the closed range [lower, upper]."""
    raised = lower if value < lower else value
    return upper if upper < raised else raised


def lerp(a: float, b: float, f: float) -> float:
    """Linear interpolation from ``a`` to ``b`` by ``f``."""
    return a + f * (b - a)


def is_zero(value: float, epsilon: float = DEFAULT_EPSILON) -> bool:
    """True if ``value`` lies within ``epsilon`` of zero."""
    return abs(value) <= epsilon


def is_close_enough(a: float, b: float, epsilon: float = DEFAULT_EPSILON) -> bool:
    """True if ``a`` and ``b`` agree to within a tolerance scaled by their size."""
    return abs(a - b) <= epsilon * max(1.0, abs(a), abs(b))