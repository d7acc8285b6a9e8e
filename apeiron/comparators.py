"""Floating-point comparisons with relative and zero tolerances."""

from __future__ import annotations

from apeiron.constants import SMALL, ZERO
from apeiron.typeinfo import is_floating_point

RELATIVE_TOLERANCE = SMALL
ZERO_TOLERANCE = SMALL


def is_equal(a, b, *, exact=False, relative_tol=RELATIVE_TOLERANCE, zero_tol=ZERO_TOLERANCE) -> bool:
    """Equality, exact or within tolerance (absolute when either side is zero)."""
    if exact:
        return a == b
    abs_a, abs_b = abs(a), abs(b)
    tolerance = zero_tol if min(abs_a, abs_b) == ZERO else relative_tol * max(abs_a, abs_b)
    return abs(a - b) < tolerance


def is_less(a, b, *, exact=False, relative_tol=RELATIVE_TOLERANCE, zero_tol=ZERO_TOLERANCE) -> bool:
    """Strictly less and not equal within tolerance."""
    return a < b and not is_equal(a, b, exact=exact, relative_tol=relative_tol, zero_tol=zero_tol)


def is_less_equal(a, b, *, exact=False, relative_tol=RELATIVE_TOLERANCE, zero_tol=ZERO_TOLERANCE) -> bool:
    """Less, or equal within tolerance unless exact."""
    return a <= b or (not exact and is_equal(a, b, relative_tol=relative_tol, zero_tol=zero_tol))


def is_larger(a, b, *, exact=False, relative_tol=RELATIVE_TOLERANCE, zero_tol=ZERO_TOLERANCE) -> bool:
    """Strictly larger: the negation of is_less_equal."""
    return not is_less_equal(a, b, exact=exact, relative_tol=relative_tol, zero_tol=zero_tol)


def is_larger_equal(a, b, *, exact=False, relative_tol=RELATIVE_TOLERANCE, zero_tol=ZERO_TOLERANCE) -> bool:
    """Larger or equal: the negation of is_less."""
    return not is_less(a, b, exact=exact, relative_tol=relative_tol, zero_tol=zero_tol)


def is_bounded(
    a,
    minimum,
    maximum,
    *,
    left_inclusive=True,
    right_inclusive=False,
    exact=False,
    relative_tol=RELATIVE_TOLERANCE,
    zero_tol=ZERO_TOLERANCE,
) -> bool:
    """Whether a lies between the bounds; tolerances apply to floating-point values only."""
    if not any(is_floating_point(x) for x in (a, minimum, maximum)):
        left = minimum <= a if left_inclusive else minimum < a
        right = a <= maximum if right_inclusive else a < maximum
        return left and right

    options = {"exact": exact, "relative_tol": relative_tol, "zero_tol": zero_tol}
    left = is_less_equal(minimum, a, **options) if left_inclusive else is_less(minimum, a, **options)
    right = is_less_equal(a, maximum, **options) if right_inclusive else is_less(a, maximum, **options)
    return left and right