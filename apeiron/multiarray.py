"""Multi-dimensional arrays stored flat, with the first index varying fastest."""

from __future__ import annotations

import itertools
import math
import operator
from collections.abc import Iterable
from typing import Any, Iterator, List, Tuple

from apeiron.typeinfo import dynamic_init_value, static_init_value


def _to_dimensions(args: Tuple[Any, ...]) -> Tuple[int, ...]:
    dimensions = tuple(operator.index(arg) for arg in args)
    if not dimensions:
        raise ValueError("A multi-dimensional array must have at least 1 dimension.")
    if any(dimension < 0 for dimension in dimensions):
        raise ValueError("The dimensions must be natural numbers.")
    return dimensions


def _is_sequence(values: Any) -> bool:
    return isinstance(values, Iterable) and not isinstance(values, (str, bytes))


class MultiArray:
    """Entries addressed by a multi-index, one component per dimension.

    The entry at ``(i0, i1, ...)`` lies at linear position
    ``i0 + d0 * (i1 + d1 * (...))``, where ``d0, d1, ...`` are the dimensions.
    """

    def __init__(self, dimensions: Tuple[int, ...], kind: type, fill: Any) -> None:
        self._dimensions = dimensions
        self.kind = kind
        self._entries: List[Any] = [kind(fill)] * math.prod(dimensions)

    @property
    def dimensions(self) -> Tuple[int, ...]:
        """The size of each dimension."""
        return self._dimensions

    def check_multi_index(self, multi_index: Iterable[Any]) -> Tuple[int, ...]:
        """Validate a multi-index against the dimensions and return it as a tuple of ints."""
        indices = tuple(operator.index(index) for index in multi_index)
        if len(indices) != len(self._dimensions):
            raise IndexError("Multi-index size mismatch.")
        for index, dimension in zip(indices, self._dimensions):
            if not 0 <= index < dimension:
                raise IndexError(f"Multi index component {index} must be lesser than {dimension}.")
        return indices

    def linear_index(self, *args: Any) -> int:
        """Position in the flat storage of the entry at the given multi-index."""
        indices = self.check_multi_index(args)
        index, factor = 0, 1
        for component, dimension in zip(indices, self._dimensions):
            index += factor * component
            factor *= dimension
        return index

    @staticmethod
    def _as_tuple(multi_index: Any) -> Tuple[Any, ...]:
        return multi_index if isinstance(multi_index, tuple) else (multi_index,)

    def __getitem__(self, multi_index: Any) -> Any:
        return self._entries[self.linear_index(*self._as_tuple(multi_index))]

    def __setitem__(self, multi_index: Any, value: Any) -> None:
        self._entries[self.linear_index(*self._as_tuple(multi_index))] = self.kind(value)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(dimensions={self._dimensions!r}, entries={self._entries!r})"

    def _fill_linear(self, values: Iterable[Any]) -> None:
        """Replace the entries in flat storage order."""
        converted = [self.kind(value) for value in values]
        if len(converted) != len(self._entries):
            raise ValueError(
                f"The array sizes {len(converted)} and {len(self._entries)} must be equal."
            )
        self._entries = converted

    def _check_shape(self, values: Any, depth: int) -> None:
        if depth == len(self._dimensions):
            return
        dimension = self._dimensions[depth]
        if not _is_sequence(values):
            raise ValueError(f"Expected a sequence of {dimension} entries at depth {depth}.")
        items = list(values)
        if len(items) != dimension:
            raise ValueError(f"The array sizes {len(items)} and {dimension} must be equal.")
        for item in items:
            self._check_shape(item, depth + 1)

    def assign(self, values: Any) -> None:
        """Set the entries from nested sequences: ``values[i][j]...`` goes to ``(i, j, ...)``."""
        self._check_shape(values, 0)
        entries = list(self._entries)
        for multi_index in itertools.product(*(range(d) for d in self._dimensions)):
            value = values
            for component in multi_index:
                value = value[component]
            entries[self.linear_index(*multi_index)] = self.kind(value)
        self._entries = entries


class StaticMultiArray(MultiArray):
    """A multi-dimensional array whose dimensions are fixed at creation.

    Entries start at ``value`` or, if it is not given, at the type's static
    initial value.
    """

    def __init__(self, *args: Any, kind: type = float, value: Any = None) -> None:
        dimensions = _to_dimensions(args)
        fill = static_init_value(kind) if value is None else value
        super().__init__(dimensions, kind, fill)


class DynamicMultiArray(MultiArray):
    """A multi-dimensional array that can be resized.

    Without dimensions it has a single dimension of size zero. Entries start
    at the type's dynamic initial value.
    """

    def __init__(self, *args: Any, kind: type = float) -> None:
        dimensions = _to_dimensions(args) if args else (0,)
        super().__init__(dimensions, kind, dynamic_init_value(kind))

    def resize(self, *args: Any) -> None:
        """Change the dimensions, keeping the leading flat entries and padding with the initial value."""
        dimensions = _to_dimensions(args)
        count = math.prod(dimensions)
        kept = self._entries[:count]
        padding = [self.kind(dynamic_init_value(self.kind))] * (count - len(kept))
        self._dimensions = dimensions
        self._entries = kept + padding