import random

import pytest

from apeiron.comparators import (
    RELATIVE_TOLERANCE,
    ZERO_TOLERANCE,
    is_bounded,
    is_equal,
    is_larger,
    is_larger_equal,
    is_less,
    is_less_equal,
)
from apeiron.constants import ONE, SMALL, TEN, ZERO

REL = RELATIVE_TOLERANCE
ZT = ZERO_TOLERANCE


@pytest.fixture
def samples():
    generator = random.Random(2022)
    pairs = []
    for _ in range(1000):
        integer = generator.randint(-10, 10)
        real = generator.uniform(-TEN, TEN)
        while real == 0.0:
            real = generator.uniform(-TEN, TEN)
        pairs.append((integer, real))
    return pairs


def test_is_equal_zero_tolerance():
    assert is_equal(ZERO, ZERO)
    assert is_equal(ZERO, 0.999 * ZT)
    assert is_equal(0.999 * ZT, ZERO)
    assert not is_equal(ZERO, ZT)
    assert not is_equal(ZT, ZERO)
    assert not is_equal(ZERO, ONE)


def test_is_equal_random(samples):
    for i, r in samples:
        assert is_equal(i, i, exact=True)
        assert is_equal(r, r, exact=True)
        assert not is_equal(i, i + 1, exact=True)
        assert not is_equal(r, r + SMALL, exact=True)

        assert is_equal(r, r)
        assert is_equal(r, r + 0.9 * REL * r)
        assert is_equal(r + 0.9 * REL * r, r)
        assert is_equal(r, r - 0.9 * REL * r)
        assert is_equal(r - 0.9 * REL * r, r)
        assert not is_equal(r, r + 1.1 * REL * r)
        assert not is_equal(r + 1.1 * REL * r, r)
        assert not is_equal(r, r - 1.1 * REL * r)
        assert not is_equal(r - 1.1 * REL * r, r)
        assert not is_equal(r, r + ONE)


def test_is_less_zero_tolerance():
    assert is_less(ZERO, ONE)
    assert is_less(ZERO, ZT)
    assert not is_less(ZERO, 0.999 * ZT)
    assert not is_less(ZERO, ZERO)


def test_is_less_random(samples):
    for i, r in samples:
        assert is_less(i, i + 1, exact=True)
        assert is_less(r, r + SMALL, exact=True)
        assert not is_less(i, i, exact=True)
        assert not is_less(r, r, exact=True)

        assert is_less(r, r + 1.1 * REL * abs(r))
        assert is_less(r - 1.1 * REL * abs(r), r)
        assert is_less(r, r + ONE)
        assert not is_less(r, r)
        assert not is_less(r, r + 0.9 * REL * abs(r))
        assert not is_less(r - 0.9 * REL * abs(r), r)


def test_is_less_equal_zero_tolerance():
    assert is_less_equal(ZERO, ZERO)
    assert is_less_equal(ZERO, ONE)
    assert is_less_equal(ZERO, 0.999 * ZT)
    assert not is_less_equal(1.111 * ZT, ZERO)


def test_is_less_equal_random(samples):
    for i, r in samples:
        assert is_less_equal(i, i, exact=True)
        assert is_less_equal(r, r, exact=True)
        assert is_less_equal(i, i + 1, exact=True)
        assert is_less_equal(r, r + SMALL, exact=True)

        assert is_less_equal(r, r)
        assert is_less_equal(r, r + ONE)
        assert is_less_equal(r, r + 0.9 * REL * abs(r))
        assert is_less_equal(r - 1.1 * REL * abs(r), r)
        assert not is_less_equal(r + 1.1 * REL * abs(r), r)


def test_is_larger_random(samples):
    for i, r in samples:
        assert is_larger(i, i, exact=True) == (not is_less_equal(i, i, exact=True))
        assert is_larger(r, r, exact=True) == (not is_less_equal(r, r, exact=True))
        assert is_larger(r, r) == (not is_less_equal(r, r))
        assert is_larger(r, r) is False
        assert is_larger(r + ONE, r) is True


def test_is_larger_equal_random(samples):
    for i, r in samples:
        assert is_larger_equal(i, i, exact=True) == (not is_less(i, i, exact=True))
        assert is_larger_equal(r, r, exact=True) == (not is_less(r, r, exact=True))
        assert is_larger_equal(r, r) == (not is_less(r, r))
        assert is_larger_equal(r, r) is True
        assert is_larger_equal(r, r + ONE) is False


def test_is_bounded_random():
    generator = random.Random(7)
    for _ in range(1000):
        min_int = -abs(generator.randint(-10, 10))
        max_int = min_int + 1 + abs(generator.randint(-10, 10))
        min_real = -abs(generator.uniform(-TEN, TEN))
        max_real = min_real + ONE + abs(generator.uniform(-TEN, TEN))

        assert is_bounded(min_int, min_int, max_int)
        assert is_bounded(min_int, min_int, max_int, left_inclusive=True)
        assert not is_bounded(min_int, min_int, max_int, left_inclusive=False)
        assert is_bounded(min_real, min_real, max_real)
        assert is_bounded(min_real, min_real, max_real, left_inclusive=True)
        assert not is_bounded(min_real, min_real, max_real, left_inclusive=False)

        assert not is_bounded(max_int, min_int, max_int)
        assert not is_bounded(max_int, min_int, max_int, left_inclusive=True, right_inclusive=False)
        assert is_bounded(max_int, min_int, max_int, left_inclusive=True, right_inclusive=True)
        assert not is_bounded(max_real, min_real, max_real)
        assert not is_bounded(max_real, min_real, max_real, left_inclusive=True, right_inclusive=False)
        assert is_bounded(max_real, min_real, max_real, left_inclusive=True, right_inclusive=True)


def test_is_bounded_tolerance_applies_to_reals_only():
    assert is_bounded(0.5 * ZT, ZERO, ONE, left_inclusive=False) is False
    assert is_bounded(1, 0, 2, left_inclusive=False) is True