"""Type references and where-clause bounds."""

from __future__ import annotations

from dataclasses import dataclass, field

from rustgen.errors import BuilderError
from rustgen.nodes.base import Renderable


@dataclass(slots=True)
class Type(Renderable):
    """A type reference: a name plus its generic arguments.

    Renders as ``name<Arg, Arg>``, or just ``name`` without arguments.

    Attributes:
        name: Type name, optionally path-qualified (``std::fmt::Debug``)
        generics: Generic arguments, rendered in order

    """

    name: str
    generics: list[Type] = field(default_factory=list)

    def generic(self, ty: Type | str) -> Type:
        """Add a generic argument.

        Raises:
            BuilderError: If the name already spells out its generics.
        """
        if "<" in self.name:
            raise BuilderError("Type", f"type name already includes generics: {self.name!r}")
        self.generics.append(as_type(ty))
        return self

    def path(self, path: str) -> Type:
        """Return a copy of this type qualified with ``path``.

        Raises:
            BuilderError: If the name is already path-qualified.
        """
        if "::" in self.name:
            raise BuilderError("Type", f"type name already includes a path: {self.name!r}")
        return Type(f"{path}::{self.name}", list(self.generics))


def as_type(ty: Type | str) -> Type:
    """Coerce a type name to a Type; Types pass through unchanged."""
    if isinstance(ty, Type):
        return ty
    return Type(ty)


@dataclass(slots=True)
class Bound:
    """A where-clause row: ``name`` must satisfy every type in ``bound``."""

    name: str
    bound: list[Type] = field(default_factory=list)
