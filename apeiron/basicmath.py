"""Digit counting, clipping, sign and rounding helpers."""

from __future__ import annotations

import math
from typing import Iterable, List, Tuple, TypeVar

from apeiron.constants import HALF, PI

T = TypeVar("T")


def n_digits(number: int) -> int:
    """Number of decimal digits in a natural number; zero has one digit."""
    if number < 0:
        raise ValueError("The number of digits is only defined for natural numbers.")
    if number == 0:
        return 1
    count = 0
    while number:
        number //= 10
        count += 1
    return count


def clipped(value: T, minimum: T, maximum: T) -> T:
    """The value clamped into [minimum, maximum]."""
    if not minimum < maximum:
        raise ValueError("The minimum bound must be lesser than the maximum bound.")
    return min(max(value, minimum), maximum)


def min_max_entries(values: Iterable[T]) -> Tuple[T, T]:
    """The smallest and the largest entry, as a pair."""
    items = list(values)
    if not items:
        raise ValueError("Cannot take the minimum and maximum of an empty sequence.")
    return min(items), max(items)


def bound_entries(values: Iterable[T], minimum: T, maximum: T) -> List[T]:
    """Every entry clamped into [minimum, maximum]."""
    return [clipped(value, minimum, maximum) for value in values]


def sgn(value, zero_sign: int = 1):
    """Signum of a value; zero_sign chooses the sign given to zero (-1, 0 or 1)."""
    if zero_sign == -1:
        result = 1 if value > 0 else -1
    elif zero_sign == 0:
        result = (0 < value) - (value < 0)
    elif zero_sign == 1:
        result = 1 if value >= 0 else -1
    else:
        raise ValueError("Unrecognised sign for zero.")
    return type(value)(result)


def positive(value, zero_sign: int = 1) -> bool:
    """Whether the value is positive, counting zero as zero_sign says."""
    if zero_sign == 0:
        raise ValueError("Zero must be either positive or negative.")
    return sgn(value, zero_sign) > 0


def negative(value, zero_sign: int = 1) -> bool:
    """Whether the value is negative, counting zero as zero_sign says."""
    if zero_sign == 0:
        raise ValueError("Zero must be either positive or negative.")
    return sgn(value, zero_sign) < 0


def floor_value(value: float) -> float:
    """Largest whole number not above the value."""
    truncated = math.trunc(value)
    return float(truncated - (truncated > value))


def ceil_value(value: float) -> float:
    """Smallest whole number not below the value."""
    truncated = math.trunc(value)
    return float(truncated + (truncated < value))


def round_value(value: float) -> float:
    """Nearest whole number, with halves rounded upwards."""
    floor = floor_value(value)
    return floor if value < floor + HALF else ceil_value(value)


def deg_to_rad(angle: float) -> float:
    """Convert degrees to radians."""
    return angle * PI / 180.0


def rad_to_deg(angle: float) -> float:
    """Convert radians to degrees."""
    return angle * 180.0 / PI