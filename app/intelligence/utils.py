"""
Numeric helpers shared by the seller health scorer.
"""

import math


def ratio(numerator: float, denominator: float) -> float:
    """
    Safe ratio capped at 1.

    Args:
        numerator: Count of matching items
        denominator: Total count

    Returns:
        0.0 when denominator is 0, otherwise min(numerator / denominator, 1)
    """
    if denominator == 0:
        return 0.0
    # Cap before dividing: huge ints overflow float division
    return min(numerator, denominator) / denominator


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Clamp a value between minimum and maximum."""
    return max(minimum, min(maximum, value))


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves going up.

    The built-in round() uses banker's rounding (round(2.5) == 2),
    which would change scores at exact .5 boundaries.
    """
    return int(math.floor(value + 0.5))


def pluralize(count: int, singular: str, plural: str) -> str:
    """Pick the singular or plural form for a count."""
    return singular if count == 1 else plural
