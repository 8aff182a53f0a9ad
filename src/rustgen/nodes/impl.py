"""Impl blocks."""

from __future__ import annotations

from dataclasses import dataclass, field

from rustgen.nodes.base import Renderable
from rustgen.nodes.function import Function
from rustgen.nodes.type import Bound, Type, as_type


@dataclass(slots=True)
class ImplType:
    """An associated type fixed by an impl: ``type Name = Type;``."""

    name: str
    ty: Type

    def __post_init__(self) -> None:
        self.ty = as_type(self.ty)


@dataclass(slots=True)
class Impl(Renderable):
    """An inherent or trait impl block.

    Renders as ``impl<G> Trait for Target``, the where clause, then a block
    of associated types followed by functions. Every function needs a body.

    Attributes:
        target: Type being implemented
        generics: Generic parameters declared on ``impl``
        trait_type: Implemented trait, None for an inherent impl
        associated_types: ``type Name = Type;`` rows
        bounds: Where-clause rows
        fns: Functions in the block
        attributes: Attribute lines rendered verbatim above ``impl``

    """

    target: Type
    generics: list[str] = field(default_factory=list)
    trait_type: Type | None = None
    associated_types: list[ImplType] = field(default_factory=list)
    bounds: list[Bound] = field(default_factory=list)
    fns: list[Function] = field(default_factory=list)
    attributes: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.target = as_type(self.target)

    def generic(self, name: str) -> Impl:
        self.generics.append(name)
        return self

    def target_generic(self, ty: Type | str) -> Impl:
        """Add a generic argument to the target type."""
        self.target.generic(ty)
        return self

    def impl_trait(self, ty: Type | str) -> Impl:
        self.trait_type = as_type(ty)
        return self

    def associate_type(self, name: str, ty: Type | str) -> Impl:
        self.associated_types.append(ImplType(name, ty))
        return self

    def bound(self, name: str, ty: Type | str) -> Impl:
        self.bounds.append(Bound(name, [as_type(ty)]))
        return self

    def attr(self, attribute: str) -> Impl:
        self.attributes.append(attribute)
        return self

    def new_fn(self, name: str) -> Function:
        func = Function(name)
        self.fns.append(func)
        return func

    def push_fn(self, func: Function) -> Impl:
        self.fns.append(func)
        return self
