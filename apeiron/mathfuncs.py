"""Division, modulo, combinatorial and integral power functions."""

from __future__ import annotations

import math

from apeiron.comparators import is_equal
from apeiron.constants import ZERO
from apeiron.typeinfo import is_integral

_MAX_FACTORIAL = 20
_MAX_EXPONENT = 30


def _check_nonzero(denominator, operation: str) -> None:
    if is_equal(float(denominator), ZERO):
        raise ZeroDivisionError(f"Denominator must be non-zero during {operation}.")


def divide(numerator, denominator) -> float:
    """Real quotient; a denominator within tolerance of zero is rejected."""
    _check_nonzero(denominator, "division")
    return float(numerator) / float(denominator)


def modulo(numerator, denominator):
    """Remainder with the sign of the numerator (truncated division)."""
    _check_nonzero(denominator, "modulo operation")
    if is_integral(numerator) and is_integral(denominator):
        remainder = abs(numerator) % abs(denominator)
        return remainder if numerator >= 0 else -remainder
    return math.fmod(numerator, denominator)


def _check_factorial_argument(n: int) -> None:
    if n < 0:
        raise ValueError("Factorial is only defined for natural numbers.")
    if n > _MAX_FACTORIAL:
        raise ValueError("Cannot currently compute the factorial of a number larger than 20.")


def factorial(n: int) -> int:
    """n! for 0 <= n <= 20."""
    _check_factorial_argument(n)
    return math.factorial(n)


def factorial_quotient(numerator: int, denominator: int) -> int:
    """numerator! / denominator! for 0 <= denominator <= numerator <= 20."""
    _check_factorial_argument(numerator)
    _check_factorial_argument(denominator)
    if denominator > numerator:
        raise ValueError("Numerator must be larger than the denominator.")
    return math.prod(range(denominator + 1, numerator + 1))


def choose(n: int, r: int) -> int:
    """Number of ways of choosing r items from n."""
    if r > n:
        raise ValueError("Numerator must be larger than the denominator.")
    return factorial_quotient(n, n - r) // factorial(r)


def ipow(x, exponent: int):
    """x raised to a natural exponent of at most 30, by repeated multiplication."""
    if exponent < 0:
        raise ValueError("The exponent must be a natural number.")
    if exponent > _MAX_EXPONENT:
        raise ValueError("Cannot currently compute the power with an exponent larger than 30.")
    result = type(x)(1)
    for _ in range(exponent):
        result = x * result
    return result


def square(x):
    """x squared."""
    return ipow(x, 2)


def cube(x):
    """x cubed."""
    return ipow(x, 3)