"""Member lists for structs and enum variants.

A Fields value is a three-state machine: it starts EMPTY and becomes TUPLE or
NAMED on the first push. Once it has a kind, pushing a member of the other
kind is a contract violation and raises immediately.

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum, auto

from rustgen.errors import BuilderError
from rustgen.nodes.base import Renderable
from rustgen.nodes.type import Type, as_type


@dataclass(slots=True)
class Field:
    """A named member with its type, doc lines and annotation lines.

    Attributes:
        name: Member name
        ty: Member type
        documentation: Doc lines, each rendered as ``/// line``
        annotation: Attribute lines rendered verbatim above the member

    """

    name: str
    ty: Type
    documentation: list[str] = field(default_factory=list)
    annotation: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.ty = as_type(self.ty)

    def doc(self, documentation: Iterable[str]) -> Field:
        self.documentation.extend(documentation)
        return self

    def annotate(self, annotation: Iterable[str]) -> Field:
        self.annotation.extend(annotation)
        return self


class FieldsKind(Enum):
    """Which member style a Fields value holds."""

    EMPTY = auto()
    TUPLE = auto()
    NAMED = auto()


@dataclass(slots=True)
class Fields(Renderable):
    """Member list: none, positional (``(A, B)``) or named (``{ a: A, }``).

    Attributes:
        kind: Current state
        named_fields: Members when kind is NAMED
        tuple_fields: Members when kind is TUPLE

    """

    kind: FieldsKind = FieldsKind.EMPTY
    named_fields: list[Field] = field(default_factory=list)
    tuple_fields: list[Type] = field(default_factory=list)

    def push_named(self, member: Field) -> Fields:
        """Push a named member.

        Raises:
            BuilderError: If the list already holds tuple members.
        """
        if self.kind is FieldsKind.TUPLE:
            raise BuilderError("Fields", "field list is tuple, cannot push named field")
        self.kind = FieldsKind.NAMED
        self.named_fields.append(member)
        return self

    def named(self, name: str, ty: Type | str) -> Fields:
        """Push a named member by its name and type."""
        return self.push_named(Field(name, as_type(ty)))

    def tuple(self, ty: Type | str) -> Fields:
        """Push a positional member.

        Raises:
            BuilderError: If the list already holds named members.
        """
        if self.kind is FieldsKind.NAMED:
            raise BuilderError("Fields", "field list is named, cannot push tuple field")
        self.kind = FieldsKind.TUPLE
        self.tuple_fields.append(as_type(ty))
        return self

    def is_empty(self) -> bool:
        return self.kind is FieldsKind.EMPTY
