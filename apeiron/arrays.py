"""Fixed-size and growable arrays with bound-checked indexing."""

from __future__ import annotations

import operator
from collections.abc import Iterable
from typing import Any, Iterator, List, Optional

from apeiron.typeinfo import dynamic_init_value, static_init_value


def _is_sequence(values: Any) -> bool:
    return isinstance(values, Iterable) and not isinstance(values, (str, bytes))


def _check_size(size: Any) -> int:
    size = operator.index(size)
    if size < 0:
        raise ValueError("The array size must be a natural number.")
    return size


class Array:
    """Common behaviour of static and dynamic arrays.

    Every entry is stored converted to ``kind``. Indices must be natural
    numbers lying within the array; anything else raises IndexError.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, kind: type, entries: Iterable[Any]) -> None:
        self.kind = kind
        self._entries: List[Any] = [kind(entry) for entry in entries]

    def _check_index(self, index: Any) -> int:
        index = operator.index(index)
        if not self._entries:
            raise IndexError("The array has not yet been sized.")
        if not 0 <= index < len(self._entries):
            raise IndexError(
                f"The array index {index} must be in the range [0, {len(self._entries) - 1}]."
            )
        return index

    def _accept_size(self, size: int) -> None:
        """Hook deciding whether the array may take on a new size."""

    def __getitem__(self, index: int) -> Any:
        return self._entries[self._check_index(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._entries[self._check_index(index)] = self.kind(value)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    def __str__(self) -> str:
        return "(" + ", ".join(str(entry) for entry in self._entries) + ")"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._entries!r})"

    def fill(self, value: Any) -> None:
        """Set every entry to the value."""
        converted = self.kind(value)
        self._entries = [converted] * len(self._entries)

    def assign(self, values: Iterable[Any]) -> None:
        """Replace the entries with the given values."""
        converted = [self.kind(value) for value in values]
        self._accept_size(len(converted))
        self._entries = converted


class StaticArray(Array):
    """An array whose size is fixed when it is created.

    Without values every entry starts at the type's static initial value
    (False, -1, 0.0, ...); a single value fills the array; a sequence of
    values must hold exactly ``size`` entries.
    """

    def __init__(self, size: int, kind: type = float, values: Any = None) -> None:
        size = _check_size(size)
        if values is None:
            entries = [static_init_value(kind)] * size
        elif _is_sequence(values):
            entries = list(values)
            if len(entries) != size:
                raise ValueError(f"The initializer list should be of size {size}.")
        else:
            entries = [values] * size
        super().__init__(kind, entries)

    def _accept_size(self, size: int) -> None:
        if size != len(self):
            raise ValueError(f"The array sizes {size} and {len(self)} must be equal.")


class DynamicArray(Array):
    """An array that can grow and shrink.

    Without values it holds ``size`` entries at the type's dynamic initial
    value; a single value fills ``size`` entries; a sequence gives the
    entries directly and, if ``size`` is given, must match it.
    """

    def __init__(self, size: Optional[int] = None, kind: type = float, values: Any = None) -> None:
        count = 0 if size is None else _check_size(size)
        if values is None:
            entries = [dynamic_init_value(kind)] * count
        elif _is_sequence(values):
            entries = list(values)
            if size is not None and len(entries) != count:
                raise ValueError(f"The array sizes {len(entries)} and {count} must be equal.")
        else:
            entries = [values] * count
        super().__init__(kind, entries)

    def append(self, value: Any) -> None:
        """Add one entry at the end."""
        self._entries.append(self.kind(value))

    def append_all(self, values: Iterable[Any]) -> None:
        """Add every value at the end, in order."""
        self._entries.extend(self.kind(value) for value in values)

    def erase(self) -> None:
        """Remove every entry."""
        self._entries = []


def to_array(array: Array, size: int) -> StaticArray:
    """A static array of the given size holding the leading entries of ``array``.

    Entries beyond the source's length keep the type's static initial value.
    """
    result = StaticArray(size, array.kind)
    for index, entry in zip(range(len(result)), array):
        result[index] = entry
    return result