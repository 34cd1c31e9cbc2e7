"""Percentage helpers with half-up rounding (0.5 always rounds up)."""

import math


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp(value: int, low: int = 0, high: int = 100) -> int:
    return max(low, min(high, value))


def percent(part: float, whole: float, empty: int = 100) -> int:
    """``part / whole`` as a rounded 0-100 integer; ``empty`` when whole is 0."""
    if whole <= 0:
        return empty
    return clamp(round_half_up(part / whole * 100))
