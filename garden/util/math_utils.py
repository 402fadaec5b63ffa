"""Small numeric helpers shared by the genetics and plant modules."""

from __future__ import annotations

import math


def clamp(value: float, min_value: float, max_value: float) -> float:
    return max(min_value, min(max_value, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up.

    Game values (days, coins, levels) use schoolbook rounding; Python's
    built-in ``round`` rounds halves to even, which would turn a 2.5 into 2.
    """
    return int(math.floor(value + 0.5))
