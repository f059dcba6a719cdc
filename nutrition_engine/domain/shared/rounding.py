"""Rounding and clamping helpers shared by every calculation service.

All displayed numbers round half-up (``2.5 -> 3``, ``-2.5 -> -2``),
not with Python's banker's rounding, so that the UI and the persistence
layer produce identical integers for the same input.
"""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties towards positive infinity.

    Example:
        >>> round_half_up(247.5)
        248
        >>> round_half_up(62.75)
        63
    """
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


def round_to_tenth(value: float) -> float:
    """Round half-up to one decimal place.

    Example:
        >>> round_to_tenth(12.25)
        12.3
    """
    return round_half_up(value * 10) / 10


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Bound value to the closed range [minimum, maximum]."""
    return max(minimum, min(maximum, value))


def finite_or_zero(value: float) -> float:
    """Replace NaN and infinities with 0."""
    return value if math.isfinite(value) else 0.0
