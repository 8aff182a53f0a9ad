"""Protocols for rustgen.

Defines the contract for render destinations.
"""

from __future__ import annotations

from typing import Protocol


class TextSink(Protocol):
    """Protocol for destinations that accept incremental text appends.

    ``io.StringIO``, open text files and ``StringBuilder`` all conform.
    A sink signals failure by raising (``OSError`` for exhausted resources,
    ``ValueError`` for closed streams); the Formatter turns either into a
    ``RenderError``.

    """

    def write(self, s: str, /) -> object:
        """Append ``s`` to the destination."""
        ...
