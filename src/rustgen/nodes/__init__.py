"""Tree nodes for rustgen.

Nodes are mutable builders: create them, chain builder methods, then render.
Rendering reads the tree and never mutates it.

Node Kinds:
├── Leaves: Type, Bound, Docs, Field, Fields, Block
├── Declarations: Struct, Enum (Variant), Trait (AssociatedType), Impl (ImplType), Function
└── Containers: Module, Scope (Import)

"""

from rustgen.nodes.block import Block, Body
from rustgen.nodes.docs import DOC_MARKER, Docs
from rustgen.nodes.enums import Enum, Variant
from rustgen.nodes.fields import Field, Fields, FieldsKind
from rustgen.nodes.function import Function
from rustgen.nodes.impl import Impl, ImplType
from rustgen.nodes.scope import Import, Item, Module, Scope
from rustgen.nodes.struct import Struct
from rustgen.nodes.trait import AssociatedType, Trait
from rustgen.nodes.type import Bound, Type, as_type
from rustgen.nodes.typedef import TypeDef

__all__ = [
    "DOC_MARKER",
    "AssociatedType",
    "Block",
    "Body",
    "Bound",
    "Docs",
    "Enum",
    "Field",
    "Fields",
    "FieldsKind",
    "Function",
    "Impl",
    "ImplType",
    "Import",
    "Item",
    "Module",
    "Scope",
    "Struct",
    "Trait",
    "Type",
    "TypeDef",
    "as_type",
]
