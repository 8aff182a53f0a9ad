"""Documentation comments."""

from __future__ import annotations

from dataclasses import dataclass

from rustgen.formatter import split_lines
from rustgen.nodes.base import Renderable

DOC_MARKER = "///"


@dataclass(slots=True)
class Docs(Renderable):
    """Documentation attached to an item.

    Each line of ``docs`` renders as its own ``/// line`` comment.

    """

    docs: str

    def lines(self) -> list[str]:
        return split_lines(self.docs)
