"""Indentation-aware stream writer.

The Formatter wraps a destination sink and applies the indentation rule to
every line it writes. Nodes never track indentation themselves: they write
lines and open blocks, and the Formatter pads each line to the current depth.

Line handling:
- A multi-line payload is split on ``\\n`` and each line is indented on its own.
- Empty lines emit only their newline, never a whitespace-only line.
- A trailing newline is deferred until the next write. Consecutive writers
  never have to terminate each other's lines, and a complete render does
  not end with a dangling newline.

Thread Safety:
A Formatter is created per render() call and owned by that call only.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from rustgen.config import DEFAULT_INDENT, FormatConfig, get_format_config
from rustgen.errors import RenderError
from rustgen.utils.logger import get_logger

if TYPE_CHECKING:
    from rustgen.protocols import TextSink

logger = get_logger(__name__)


def split_lines(s: str) -> list[str]:
    """Split ``s`` into lines: a final terminator does not open a new line."""
    lines = s.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class Formatter:
    """Indentation-tracking writer over a ``TextSink``.

    Usage:
        >>> sb = StringBuilder()
        >>> fmt = Formatter(sb)
        >>> fmt.write("struct Foo")
        >>> fmt.block(lambda f: f.writeln("one: usize,"))
        >>> sb.build()
        'struct Foo {\\n    one: usize,\\n}'

    Attributes:
        spaces: Number of spaces to start a new line with
        indent: Number of spaces per indentation level

    """

    __slots__ = ("_dst", "spaces", "indent", "_last_char", "_newline")

    def __init__(self, dst: TextSink, config: FormatConfig | None = None) -> None:
        """Create a formatter writing to ``dst``.

        Args:
            dst: Destination of the formatted text.
            config: Format configuration; the context's active config if None.
        """
        config = config if config is not None else get_format_config()
        self._dst = dst
        self.spaces = 0
        self.indent = config.indent
        self._last_char: str | None = None
        self._newline = False

    def __repr__(self) -> str:
        return (
            f"Formatter(spaces={self.spaces}, indent={self.indent}, "
            f"last_char={self._last_char!r})"
        )

    def write(self, s: str) -> None:
        """Write ``s``, indenting every line that starts in it."""
        if not s:
            return

        for i, line in enumerate(split_lines(s)):
            if i != 0 or self._newline:
                self._newline = False
                self._push("\n")

            if not line:
                continue

            if self.is_start_of_line() and self.spaces:
                self._push(" " * self.spaces)

            self._push(line)

        self._last_char = s[-1]
        if self._last_char == "\n":
            self._newline = True

    def writeln(self, s: str = "") -> None:
        """Write ``s`` followed by a newline."""
        self.write(s + "\n")

    def is_start_of_line(self) -> bool:
        """Check if the destination is at the start of a new line."""
        return self._last_char is None or self._last_char == "\n"

    @contextmanager
    def indented(self) -> Iterator[Formatter]:
        """Increase the indentation by one level for the duration of the block."""
        self.spaces += self.indent
        try:
            yield self
        finally:
            self.spaces -= self.indent

    def indent_with[R](self, f: Callable[[Formatter], R]) -> R:
        """Call ``f`` with the indentation level incremented by one."""
        with self.indented():
            return f(self)

    def block(self, f: Callable[[Formatter], object], suffix: str = "") -> None:
        """Wrap the output of ``f`` inside a brace-delimited block.

        Args:
            f: Writes the block's contents.
            suffix: Text written right after the closing brace (e.g. ``","``).
        """
        if not self.is_start_of_line():
            self.write(" ")

        self.writeln("{")
        self.indent_with(f)
        self.writeln("}" + suffix)

    def _push(self, s: str) -> None:
        self._last_char = s[-1]
        try:
            self._dst.write(s)
        except (OSError, ValueError) as exc:
            logger.debug("Sink rejected write of %d chars", len(s), exc_info=True)
            raise RenderError(f"destination refused write: {exc}") from exc


__all__ = [
    "DEFAULT_INDENT",
    "Formatter",
    "split_lines",
]
