"""Struct declarations."""

from __future__ import annotations

from dataclasses import dataclass, field

from rustgen.nodes.fields import Field, Fields
from rustgen.nodes.type import Type, as_type
from rustgen.nodes.typedef import TypeDef


@dataclass(slots=True)
class Struct(TypeDef):
    """A struct: unit (``struct Foo;``), tuple or named-field form."""

    fields: Fields = field(default_factory=Fields)

    def push_field(self, member: Field) -> Struct:
        self.fields.push_named(member)
        return self

    def field(self, name: str, ty: Type | str) -> Struct:
        self.fields.named(name, as_type(ty))
        return self

    def tuple_field(self, ty: Type | str) -> Struct:
        self.fields.tuple(ty)
        return self
