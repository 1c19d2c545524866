"""Module for miscellaneous multi-use functions"""

__all__ = ['round_half_away']

import math


def round_half_away(value: float, precision: int) -> float:
    """
    Rounds a number to a fixed count of decimal places, where a value exactly
    between the two candidates is rounded away from zero (1.5 -> 2, -1.5 -> -2).

    Unlike the builtin round(), halves never go to the even neighbor.

    Args:
        value:
            The float value to be rounded

        precision:
            The number of decimal places to keep

    Returns:
        float
    """
    if not math.isfinite(value):
        return value

    scale = 10 ** precision
    scaled = abs(value * scale)
    whole = math.floor(scaled)
    if scaled - whole >= 0.5:
        whole += 1

    return math.copysign(whole, value) / scale
