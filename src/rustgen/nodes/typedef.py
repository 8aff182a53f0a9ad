"""Shared declaration head for structs, enums and traits."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Self

from rustgen.nodes.base import Renderable
from rustgen.nodes.docs import Docs
from rustgen.nodes.type import Bound, Type, as_type


@dataclass(slots=True)
class TypeDef(Renderable):
    """Head of a type declaration.

    Renders, in order: docs, ``#[allow(..)]`` lines, one ``#[derive(..)]``
    line, ``#[repr(..)]``, raw attribute lines, visibility, keyword, the type
    with its generics, and the where clause.

    Attributes:
        ty: Declared type; its generic arguments are the parameter list
        visibility: Visibility modifier
        docs: Documentation
        derives: Derived traits, joined into a single attribute
        allowed: Allowed lints, one attribute each
        repr_hint: Layout passed to ``#[repr(..)]``
        bounds: Where-clause rows
        attributes: Attribute lines rendered verbatim

    """

    ty: Type
    visibility: str | None = None
    docs: Docs | None = None
    derives: list[str] = field(default_factory=list)
    allowed: list[str] = field(default_factory=list)
    repr_hint: str | None = None
    bounds: list[Bound] = field(default_factory=list)
    attributes: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.ty = as_type(self.ty)

    @property
    def name(self) -> str:
        return self.ty.name

    def vis(self, vis: str) -> Self:
        self.visibility = vis
        return self

    def generic(self, name: str) -> Self:
        """Add a generic parameter; ``"T, U"`` and ``"T: Bound"`` render as written."""
        self.ty.generic(name)
        return self

    def bound(self, name: str, ty: Type | str) -> Self:
        self.bounds.append(Bound(name, [as_type(ty)]))
        return self

    def doc(self, docs: str) -> Self:
        self.docs = Docs(docs)
        return self

    def derive(self, name: str) -> Self:
        self.derives.append(name)
        return self

    def allow(self, allow: str) -> Self:
        self.allowed.append(allow)
        return self

    def repr(self, repr_hint: str) -> Self:
        self.repr_hint = repr_hint
        return self

    def attr(self, attribute: str) -> Self:
        """Add an attribute line rendered verbatim, e.g. ``#[non_exhaustive]``."""
        self.attributes.append(attribute)
        return self
