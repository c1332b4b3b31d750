"""Structured text output with indentation and aligned columns."""

from __future__ import annotations

import io
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

DEFAULT_INDENT = "\t"


class Printer:
    """Writes formatted lines to a text stream, managing indentation."""

    def __init__(self, out: TextIO) -> None:
        self._out = out
        self._level = 0
        self._indent = DEFAULT_INDENT
        self._pending = False

    def set_indent_string(self, indent: str) -> None:
        """Set the string used for one level of indentation."""
        self._indent = indent

    def indent(self) -> None:
        """Increase indentation by one level."""
        self._level += 1

    def dedent(self) -> None:
        """Decrease indentation by one level."""
        self._level -= 1

    @contextmanager
    def indented(self) -> Iterator[None]:
        """Indent by one level for the duration of the block."""
        self.indent()
        try:
            yield
        finally:
            self.dedent()

    def linef(self, format: str, *args: object) -> None:
        """Print a formatted line."""
        self.printf(format, *args)
        self.nl()

    def nl(self) -> None:
        """Print a newline."""
        self.printf("\n")
        self._pending = True

    def printf(self, format: str, *args: object) -> None:
        """Print %-formatted output."""
        text = format % args if args else format
        if self._pending:
            text = self._indent * self._level + text
            self._pending = False
        self._out.write(text)


class TabWriter(Printer):
    """A printer that aligns tab-separated cells into columns on flush."""

    def __init__(
        self, out: TextIO, minwidth: int, tabwidth: int, padding: int, padchar: str = " "
    ) -> None:
        if len(padchar) != 1:
            raise ValueError("padchar must be a single character")
        self._buffer = io.StringIO()
        super().__init__(self._buffer)
        self._target = out
        self._minwidth = minwidth
        self._tabwidth = tabwidth
        self._padding = padding
        self._padchar = padchar

    def flush(self) -> None:
        """Write all buffered text, aligned, to the underlying stream."""
        text = self._buffer.getvalue()
        self._buffer.seek(0)
        self._buffer.truncate()
        self._target.write(self._format(text))

    def _pad(self, textwidth: int, cellwidth: int) -> str:
        if self._padchar == "\t":
            if self._tabwidth == 0:
                return ""
            cellwidth = -(-cellwidth // self._tabwidth) * self._tabwidth
            n = cellwidth - textwidth
            return "\t" * -(-n // self._tabwidth)
        return self._padchar * (cellwidth - textwidth)

    def _format(self, text: str) -> str:
        lines = [line.split("\t") for line in text.split("\n")]
        last = len(lines) - 1
        widths: list[int] = []
        out: list[str] = []

        def write_lines(line0: int, line1: int) -> None:
            for k in range(line0, line1):
                for j, cell in enumerate(lines[k]):
                    out.append(cell)
                    if j < len(widths):
                        out.append(self._pad(len(cell), widths[j]))
                if k != last:
                    out.append("\n")

        def format_block(line0: int, line1: int) -> None:
            column = len(widths)
            this = line0
            while this < line1:
                if column >= len(lines[this]) - 1:
                    this += 1
                    continue
                write_lines(line0, this)
                line0 = this
                width = self._minwidth
                while this < line1 and column < len(lines[this]) - 1:
                    width = max(width, len(lines[this][column]) + self._padding)
                    this += 1
                widths.append(width)
                format_block(line0, this)
                widths.pop()
                line0 = this
            write_lines(line0, line1)

        format_block(0, len(lines))
        return "".join(out)