"""A list with bound-checked positional access and bulk assignment."""

from __future__ import annotations

import operator
from typing import Any, Iterable, Optional


class IndexedList(list):
    """A list whose integer indices must be natural numbers within its length."""

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        super().__init__(() if values is None else values)

    def _check_index(self, index: Any) -> int:
        index = operator.index(index)
        if not len(self):
            raise IndexError("The list has not yet been sized.")
        if not 0 <= index < len(self):
            raise IndexError(f"The list index {index} must be in the range [0, {len(self) - 1}].")
        return index

    def __getitem__(self, index):
        if isinstance(index, slice):
            return IndexedList(super().__getitem__(index))
        return super().__getitem__(self._check_index(index))

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            super().__setitem__(index, value)
            return
        super().__setitem__(self._check_index(index), value)

    def fill(self, value: Any) -> None:
        """Set every entry to the value."""
        for index in range(len(self)):
            super().__setitem__(index, value)

    def assign(self, values: Iterable[Any]) -> None:
        """Overwrite the entries with values; the count must match the length."""
        items = list(values)
        if len(items) != len(self):
            raise ValueError(f"The list sizes {len(items)} and {len(self)} must be equal.")
        for index, item in enumerate(items):
            super().__setitem__(index, item)