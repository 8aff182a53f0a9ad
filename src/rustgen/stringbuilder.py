"""StringBuilder for O(n) string accumulation.

The default render destination. Appends to a list, joins once at the end:
O(n) total vs O(n²) for repeated string concatenation.

Thread Safety:
StringBuilder instances are local to each to_string() call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator conforming to ``TextSink``.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.write("struct Foo")
            10
            >>> sb.write(";")
            1
            >>> sb.build()
            'struct Foo;'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []

    def write(self, s: str) -> int:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            Number of characters appended, like ``io.TextIOBase.write``
        """
        if s:
            self._parts.append(s)
        return len(s)

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)

    def clear(self) -> StringBuilder:
        """Clear all accumulated parts.

        Returns:
            self for method chaining
        """
        self._parts.clear()
        return self

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        """Return True if any parts have been appended."""
        return bool(self._parts)
