"""Type categories and default initial values for the categories."""

from __future__ import annotations

import enum
import math
import numbers
from typing import Any


class TypeCategory(enum.Enum):
    """Broad category of a data type."""

    BOOLEAN = "boolean"
    INTEGRAL = "integral"
    FLOATING_POINT = "floating_point"
    STRING = "string"
    OTHER = "other"


def _as_type(kind: Any) -> type:
    """Accept either a type or a value and return the type."""
    return kind if isinstance(kind, type) else type(kind)


def is_boolean(kind: Any) -> bool:
    """Whether the type (or the type of the value) is a boolean type."""
    return issubclass(_as_type(kind), bool)


def is_integral(kind: Any) -> bool:
    """Whether the type is an integer type. Booleans are not counted."""
    cls = _as_type(kind)
    return issubclass(cls, numbers.Integral) and not issubclass(cls, bool)


def is_floating_point(kind: Any) -> bool:
    """Whether the type is a real, non-integral number type."""
    cls = _as_type(kind)
    return issubclass(cls, numbers.Real) and not issubclass(cls, numbers.Integral)


def is_arithmetic(kind: Any) -> bool:
    """Whether the type is an integer or a floating-point type."""
    return is_integral(kind) or is_floating_point(kind)


def _is_string(kind: Any) -> bool:
    return issubclass(_as_type(kind), str)


def type_category(kind: Any) -> TypeCategory:
    """The category of the given type, or of the type of the given value."""
    if is_boolean(kind):
        return TypeCategory.BOOLEAN
    if is_integral(kind):
        return TypeCategory.INTEGRAL
    if is_floating_point(kind):
        return TypeCategory.FLOATING_POINT
    if _is_string(kind):
        return TypeCategory.STRING
    return TypeCategory.OTHER


def is_nan(value: float) -> bool:
    """Whether the value is NaN."""
    return math.isnan(value)


def is_infinity(value: float) -> bool:
    """Whether the value is positive or negative infinity."""
    return math.isinf(value)


def static_init_value(kind: Any) -> Any:
    """Initial value for a type; strings do not qualify."""
    cls = _as_type(kind)
    category = type_category(cls)
    if category is TypeCategory.BOOLEAN:
        return cls(False)
    if category is TypeCategory.INTEGRAL:
        return cls(-1)
    if category is TypeCategory.FLOATING_POINT:
        return cls(0.0)
    if category is TypeCategory.OTHER:
        return cls()
    raise ValueError("The passed type does not qualify for static initialisation.")


def dynamic_init_value(kind: Any) -> Any:
    """Initial value for a type, with strings starting as a NUL character."""
    cls = _as_type(kind)
    if type_category(cls) is TypeCategory.STRING:
        return cls("\0")
    return static_init_value(cls)