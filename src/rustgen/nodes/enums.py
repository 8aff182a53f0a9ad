"""Enum declarations and their variants."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from rustgen.nodes.base import Renderable
from rustgen.nodes.fields import Fields
from rustgen.nodes.type import Type
from rustgen.nodes.typedef import TypeDef


@dataclass(slots=True)
class Variant(Renderable):
    """One enum variant: ``Name,``, ``Name(A, B),`` or ``Name { a: A, },``.

    Attributes:
        name: Variant name
        fields: Payload members
        annotations: Attribute lines rendered verbatim above the variant

    """

    name: str
    fields: Fields = field(default_factory=Fields)
    annotations: list[str] = field(default_factory=list)

    def named(self, name: str, ty: Type | str) -> Variant:
        self.fields.named(name, ty)
        return self

    def tuple(self, ty: Type | str) -> Variant:
        self.fields.tuple(ty)
        return self

    def annotate(self, annotations: Iterable[str]) -> Variant:
        self.annotations.extend(annotations)
        return self


@dataclass(slots=True)
class Enum(TypeDef):
    """An enum and its variants, rendered in insertion order."""

    variants: list[Variant] = field(default_factory=list)

    def new_variant(self, name: str) -> Variant:
        """Add a variant and return it for further building."""
        variant = Variant(name)
        self.variants.append(variant)
        return variant

    def push_variant(self, variant: Variant) -> Enum:
        self.variants.append(variant)
        return self
