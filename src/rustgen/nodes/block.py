"""Brace-delimited code blocks and their body lines."""

from __future__ import annotations

from dataclasses import dataclass, field

from rustgen.nodes.base import Renderable


@dataclass(slots=True)
class Block(Renderable):
    """An indented ``{ ... }`` region holding body lines and nested blocks.

    Renders as ``before {``, the indented body, then ``}after``.

    Attributes:
        before: Text written ahead of the opening brace (``"if x"``, ``"loop"``)
        body: Entries rendered in order, one per line or nested block
        tail: Text written right after the closing brace (``";"``, ``" else"``)

    """

    before: str = ""
    body: list[Body] = field(default_factory=list)
    tail: str = ""

    def line(self, line: str) -> Block:
        self.body.append(line)
        return self

    def push_block(self, block: Block) -> Block:
        self.body.append(block)
        return self

    def after(self, after: str) -> Block:
        self.tail = after
        return self


# A body entry: one verbatim line, or a nested block
type Body = str | Block
