"""String conversion, replacement, splitting and brace-enclosure helpers."""

from __future__ import annotations

import re
from typing import Any, List, Optional, Tuple

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class EnclosureError(ValueError):
    """An opening symbol was found without a matching closing symbol."""


def to_string(value: Any, decimals: int = 0) -> str:
    """The first whitespace-free token of the value's text form.

    Floating-point values are written with ``decimals`` fixed decimals when
    ``decimals`` is non-zero, otherwise with six significant digits.
    """
    if decimals < 0:
        raise ValueError("The number of decimals must be a natural number.")
    if isinstance(value, bool):
        text = "1" if value else "0"
    elif isinstance(value, float):
        text = f"{value:.{decimals}f}" if decimals else f"{value:g}"
    else:
        text = str(value)
    tokens = text.split()
    return tokens[0] if tokens else ""


def to_number(text: str, kind: type = int):
    """Parse the leading number of a string as ``int`` or ``float``.

    Leading whitespace and trailing text are ignored; a string that does not
    start with a number raises ValueError.
    """
    if kind is int:
        match = _INT_PREFIX.match(text)
        if not match:
            raise ValueError(f"No integer conversion could be performed on {text!r}.")
        return int(match.group(1))
    if kind is float:
        match = _FLOAT_PREFIX.match(text)
        if not match:
            raise ValueError(f"No floating-point conversion could be performed on {text!r}.")
        return float(match.group(1))
    raise TypeError("Only int and float conversions are supported.")


def peek_at(position: int, text: str) -> Optional[str]:
    """The character at the position, or None if it lies past the end."""
    if position < 0:
        raise ValueError("The position must be a natural number.")
    return text[position] if position < len(text) else None


def is_substring(substr: str, text: str) -> bool:
    """Whether the first string occurs within the second."""
    return substr in text


def replace(from_str: str, to_str: str, text: str) -> str:
    """Replace every occurrence of ``from_str`` in ``text``; an empty pattern changes nothing."""
    if not from_str:
        return text
    return text.replace(from_str, to_str)


def remove(substr: str, text: str) -> str:
    """Remove every occurrence of ``substr`` from ``text``."""
    return replace(substr, "", text)


def split(text: str, delimiter: str = "") -> List[str]:
    """Split on a delimiter; an empty delimiter splits into single characters."""
    if not delimiter:
        return list(text)
    return text.split(delimiter)


def _enclosure_bounds(
    text: str, start: int, opening: str, closing: str, include_braces: bool
) -> Optional[Tuple[int, int]]:
    """Slice bounds of the first enclosure at or after ``start``, or None."""
    open_index = text.find(opening, start)
    if open_index == -1:
        return None

    count = 0
    close_index = None
    for index in range(open_index, len(text)):
        char = text[index]
        if opening != closing:
            if char == opening:
                count += 1
            elif char == closing:
                count -= 1
            if count <= 0:
                close_index = index
                break
        else:
            if char == opening:
                count += 1
            if count == 2:
                close_index = index
                break

    if close_index == open_index:
        raise EnclosureError("The closing symbol is at the same location as the opening symbol.")
    if close_index is None:
        raise EnclosureError("Could not find the closing symbol in the input string.")

    if include_braces:
        return open_index, close_index + 1
    return open_index + 1, close_index


def first_enclosure(text: str, opening: str, closing: str, include_braces: bool = False) -> Optional[str]:
    """The first substring enclosed by the symbols, or None if there is no opening symbol."""
    bounds = _enclosure_bounds(text, 0, opening, closing, include_braces)
    if bounds is None:
        return None
    return text[bounds[0]:bounds[1]]


def first_enclosure_chain(text: str, opening: str, closing: str, include_braces: bool = False) -> List[str]:
    """The first enclosure and every enclosure that directly follows it."""
    chain: List[str] = []
    start = 0
    while True:
        bounds = _enclosure_bounds(text, start, opening, closing, include_braces)
        if bounds is None:
            break
        chain.append(text[bounds[0]:bounds[1]])
        trailing = bounds[1] + (0 if include_braces else 1)
        if trailing < len(text) and text[trailing] == opening:
            start = trailing
        else:
            break
    return chain


def all_enclosures(text: str, opening: str, closing: str, include_braces: bool = False) -> List[str]:
    """Every top-level enclosure in order of appearance."""
    enclosures: List[str] = []
    start = 0
    while True:
        bounds = _enclosure_bounds(text, start, opening, closing, include_braces)
        if bounds is None:
            break
        enclosures.append(text[bounds[0]:bounds[1]])
        start = bounds[1] + (0 if include_braces else 1)
    return enclosures