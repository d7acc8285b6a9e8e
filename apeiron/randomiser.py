"""Uniform random generators for booleans, integers and reals."""

from __future__ import annotations

import random
from typing import Optional, Union

from apeiron.typeinfo import is_floating_point, is_integral


class RandomBool:
    """Generates uniformly random booleans."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._generator = random.Random(seed)

    def __call__(self) -> bool:
        return bool(self._generator.randint(0, 1))


class RandomInt:
    """Generates integers uniformly in the closed range [minimum, maximum]."""

    def __init__(self, minimum: int = -1, maximum: int = 1, seed: Optional[int] = None) -> None:
        self._generator = random.Random(seed)
        self.reset(minimum, maximum)

    def __call__(self) -> int:
        return self._generator.randint(self.minimum, self.maximum)

    def reset(self, minimum: int, maximum: int) -> None:
        """Change the bounds of the distribution."""
        if minimum > maximum:
            raise ValueError("The minimum bound must not exceed the maximum bound.")
        self.minimum = minimum
        self.maximum = maximum


class RandomReal:
    """Generates reals uniformly in the half-open range [minimum, maximum)."""

    def __init__(self, minimum: float = -1.0, maximum: float = 1.0, seed: Optional[int] = None) -> None:
        self._generator = random.Random(seed)
        self.reset(minimum, maximum)

    def __call__(self) -> float:
        value = self.minimum + (self.maximum - self.minimum) * self._generator.random()
        return value if value < self.maximum else self.minimum

    def reset(self, minimum: float, maximum: float) -> None:
        """Change the bounds of the distribution."""
        if minimum > maximum:
            raise ValueError("The minimum bound must not exceed the maximum bound.")
        self.minimum = float(minimum)
        self.maximum = float(maximum)


def make_random(minimum, maximum) -> Union[RandomInt, RandomReal]:
    """A generator over [minimum, maximum] chosen from the type of the bounds."""
    if is_integral(minimum) and is_integral(maximum):
        return RandomInt(minimum, maximum)
    if is_floating_point(minimum) and is_floating_point(maximum):
        return RandomReal(minimum, maximum)
    raise TypeError("Both bounds must be integers or both must be floating-point values.")