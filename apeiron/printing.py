"""Printing of values with a chosen floating-point format."""

from __future__ import annotations

import enum
import sys
from typing import Any, Optional, TextIO


class PrintFormat(enum.Enum):
    """Floating-point notation used for printing."""

    FIXED = "fixed"
    SCIENTIFIC = "scientific"
    HEX_FLOAT = "hex_float"
    DEFAULT = "default"


class Printer:
    """Writes values to a stream, separated and terminated by a newline.

    ``format`` and ``precision`` control how floating-point values appear;
    ``enabled`` set to False suppresses all output.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream
        self.format = PrintFormat.DEFAULT
        self.precision = 6
        self.enabled = True

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def format_value(self, value: Any) -> str:
        """Text of a value, with floats written in the current format."""
        if not isinstance(value, float):
            return str(value)
        if not isinstance(self.format, PrintFormat):
            raise ValueError("Print format not recognised.")
        if self.format is PrintFormat.FIXED:
            return f"{value:.{self.precision}f}"
        if self.format is PrintFormat.SCIENTIFIC:
            return f"{value:.{self.precision}e}"
        if self.format is PrintFormat.HEX_FLOAT:
            return value.hex()
        return f"{value:.{self.precision}g}"

    def print(self, *args: Any, sep: str = " ") -> None:
        """Write the arguments joined by ``sep``, followed by a newline."""
        if not self.enabled:
            return
        self.stream.write(sep.join(self.format_value(arg) for arg in args) + "\n")

    def flush(self) -> None:
        """Flush the underlying stream."""
        self.stream.flush()