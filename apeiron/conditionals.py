"""Comparison against any one of several values."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Tuple


class OneOf:
    """Compares equal to anything that equals at least one of its values."""

    __slots__ = ("values",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, values: Iterable[Any]) -> None:
        self.values: Tuple[Any, ...] = tuple(values)

    def __eq__(self, other: object) -> bool:
        return any(other == value for value in self.values)

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __repr__(self) -> str:
        return f"one_of{self.values!r}"


def one_of(*args: Any) -> OneOf:
    """Match any of the arguments, or any entry of a single container argument.

    Strings and bytes count as single values, not containers.
    """
    if len(args) == 1 and isinstance(args[0], Iterable) and not isinstance(args[0], (str, bytes)):
        return OneOf(args[0])
    return OneOf(args)