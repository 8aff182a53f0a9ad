"""Tree root (Scope), modules, and imports.

Scope and Module are defined together: a module owns a scope, and a scope
holds modules among its items.

"""

from __future__ import annotations

from dataclasses import dataclass, field

from rustgen.nodes.base import Renderable
from rustgen.nodes.docs import Docs
from rustgen.nodes.enums import Enum
from rustgen.nodes.function import Function
from rustgen.nodes.impl import Impl
from rustgen.nodes.struct import Struct
from rustgen.nodes.trait import Trait


@dataclass(slots=True)
class Import:
    """A ``use path::ty;`` entry, optionally re-exported with a visibility."""

    path: str
    ty: str
    visibility: str | None = None

    @property
    def line(self) -> str:
        return f"{self.path}::{self.ty}"

    def vis(self, vis: str) -> Import:
        self.visibility = vis
        return self


@dataclass(slots=True)
class Scope(Renderable):
    """An ordered list of items plus the imports they need.

    Renders imports grouped by visibility and then by path, a blank line,
    then the items separated by blank lines.

    Attributes:
        imports: ``path -> type -> Import``, in insertion order
        items: Top-level items in render order

    """

    imports: dict[str, dict[str, Import]] = field(default_factory=dict)
    items: list[Item] = field(default_factory=list)

    def import_(self, path: str, ty: str) -> Import:
        """Import ``ty`` from ``path``; repeated imports return the same entry.

        Only the first segment of a nested ``ty`` (``fmt::Debug``) is keyed,
        so ``use std::{fmt, io};`` groups correctly.
        """
        key = ty.split("::", 1)[0]
        by_ty = self.imports.setdefault(path, {})
        if key not in by_ty:
            by_ty[key] = Import(path, ty)
        return by_ty[key]

    def new_module(self, name: str) -> Module:
        module = Module(name)
        self.items.append(module)
        return module

    def get_module(self, name: str) -> Module | None:
        for item in self.items:
            if isinstance(item, Module) and item.name == name:
                return item
        return None

    def get_or_new_module(self, name: str) -> Module:
        module = self.get_module(name)
        if module is None:
            module = self.new_module(name)
        return module

    def push_module(self, module: Module) -> Scope:
        self.items.append(module)
        return self

    def new_struct(self, name: str) -> Struct:
        struct = Struct(name)
        self.items.append(struct)
        return struct

    def push_struct(self, struct: Struct) -> Scope:
        self.items.append(struct)
        return self

    def new_fn(self, name: str) -> Function:
        func = Function(name)
        self.items.append(func)
        return func

    def push_fn(self, func: Function) -> Scope:
        self.items.append(func)
        return self

    def new_trait(self, name: str) -> Trait:
        trait = Trait(name)
        self.items.append(trait)
        return trait

    def push_trait(self, trait: Trait) -> Scope:
        self.items.append(trait)
        return self

    def new_enum(self, name: str) -> Enum:
        enum = Enum(name)
        self.items.append(enum)
        return enum

    def push_enum(self, enum: Enum) -> Scope:
        self.items.append(enum)
        return self

    def new_impl(self, target: str) -> Impl:
        impl = Impl(target)
        self.items.append(impl)
        return impl

    def push_impl(self, impl: Impl) -> Scope:
        self.items.append(impl)
        return self

    def raw(self, text: str) -> Scope:
        """Add pre-formatted source text as an item."""
        self.items.append(text)
        return self


@dataclass(slots=True)
class Module(Renderable):
    """An inline ``mod name { ... }`` with its own scope.

    Attributes:
        name: Module name
        visibility: Visibility modifier
        docs: Documentation rendered above ``mod``
        scope: Contents of the module
        attributes: Attribute lines rendered verbatim above ``mod``

    """

    name: str
    visibility: str | None = None
    docs: Docs | None = None
    scope: Scope = field(default_factory=Scope)
    attributes: list[str] = field(default_factory=list)

    def vis(self, vis: str) -> Module:
        self.visibility = vis
        return self

    def doc(self, docs: str) -> Module:
        self.docs = Docs(docs)
        return self

    def attr(self, attribute: str) -> Module:
        self.attributes.append(attribute)
        return self

    def import_(self, path: str, ty: str) -> Module:
        self.scope.import_(path, ty)
        return self

    def new_module(self, name: str) -> Module:
        return self.scope.new_module(name)

    def get_module(self, name: str) -> Module | None:
        return self.scope.get_module(name)

    def get_or_new_module(self, name: str) -> Module:
        return self.scope.get_or_new_module(name)

    def push_module(self, module: Module) -> Module:
        self.scope.push_module(module)
        return self

    def new_struct(self, name: str) -> Struct:
        return self.scope.new_struct(name)

    def push_struct(self, struct: Struct) -> Module:
        self.scope.push_struct(struct)
        return self

    def new_fn(self, name: str) -> Function:
        return self.scope.new_fn(name)

    def push_fn(self, func: Function) -> Module:
        self.scope.push_fn(func)
        return self

    def new_trait(self, name: str) -> Trait:
        return self.scope.new_trait(name)

    def push_trait(self, trait: Trait) -> Module:
        self.scope.push_trait(trait)
        return self

    def new_enum(self, name: str) -> Enum:
        return self.scope.new_enum(name)

    def push_enum(self, enum: Enum) -> Module:
        self.scope.push_enum(enum)
        return self

    def new_impl(self, target: str) -> Impl:
        return self.scope.new_impl(target)

    def push_impl(self, impl: Impl) -> Module:
        self.scope.push_impl(impl)
        return self


# A top-level declaration held by a Scope; a plain string is raw source text
type Item = Module | Struct | Function | Trait | Enum | Impl | str
