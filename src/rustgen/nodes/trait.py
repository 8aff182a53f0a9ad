"""Trait declarations."""

from __future__ import annotations

from dataclasses import dataclass, field

from rustgen.nodes.function import Function
from rustgen.nodes.type import Type, as_type
from rustgen.nodes.typedef import TypeDef


@dataclass(slots=True)
class AssociatedType:
    """An associated type declared by a trait: ``type Name: A + B;``."""

    name: str
    bounds: list[Type] = field(default_factory=list)

    def bound(self, ty: Type | str) -> AssociatedType:
        self.bounds.append(as_type(ty))
        return self


@dataclass(slots=True)
class Trait(TypeDef):
    """A trait with supertraits, associated types and method signatures.

    Attributes:
        parents: Supertraits, rendered as ``: A + B`` after the name
        associated_types: Associated types, rendered before the methods
        fns: Methods; a method without a body renders as a signature

    """

    parents: list[Type] = field(default_factory=list)
    associated_types: list[AssociatedType] = field(default_factory=list)
    fns: list[Function] = field(default_factory=list)

    def parent(self, ty: Type | str) -> Trait:
        self.parents.append(as_type(ty))
        return self

    def associated_type(self, name: str) -> AssociatedType:
        """Add an associated type and return it for adding bounds."""
        assoc = AssociatedType(name)
        self.associated_types.append(assoc)
        return assoc

    def new_fn(self, name: str) -> Function:
        """Add a method signature; adding lines gives it a default body."""
        func = Function(name, body=None)
        self.fns.append(func)
        return func

    def push_fn(self, func: Function) -> Trait:
        self.fns.append(func)
        return self
