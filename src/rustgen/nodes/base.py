"""Shared base for renderable nodes."""

from __future__ import annotations


class Renderable:
    """Mixin giving every node a ``str()`` that renders it.

    ``str(node)`` renders through a fresh Formatter with the active config,
    the same as ``rustgen.to_string(node)``.

    """

    __slots__ = ()

    def __str__(self) -> str:
        from rustgen.renderer import to_string

        return to_string(self)  # type: ignore[arg-type]
