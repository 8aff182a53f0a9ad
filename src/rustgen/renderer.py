"""Renderer: the single "format into a Formatter" operation for every node.

The set of renderable nodes is closed (``FormatCode``). ``fmt_code`` matches
on the node kind and writes it through the shared Formatter, recursing into
children with the same Formatter so indentation threads through the tree.

Example:
    >>> from rustgen import Scope, to_string
    >>> scope = Scope()
    >>> _ = scope.new_struct("Foo").field("one", "usize")
    >>> print(to_string(scope))
    struct Foo {
        one: usize,
    }

Thread Safety:
Each render() call creates its own Formatter. The tree is only read, so
concurrent renders of the same tree are safe as long as nobody mutates it.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rustgen.config import FormatConfig
from rustgen.errors import BuilderError, RenderError
from rustgen.formatter import Formatter
from rustgen.layout import fmt_bound_rhs, fmt_bounds, fmt_generics, fmt_type
from rustgen.nodes import (
    DOC_MARKER,
    Block,
    Docs,
    Enum,
    Fields,
    FieldsKind,
    Function,
    Impl,
    Module,
    Scope,
    Struct,
    Trait,
    Type,
    TypeDef,
    Variant,
)
from rustgen.stringbuilder import StringBuilder
from rustgen.utils.logger import get_logger

if TYPE_CHECKING:
    from rustgen.protocols import TextSink

logger = get_logger(__name__)

# Every node kind the renderer knows; a plain string is a raw line
type FormatCode = (
    Type
    | Docs
    | Fields
    | Block
    | Variant
    | Function
    | Struct
    | Enum
    | Trait
    | Impl
    | Module
    | Scope
    | str
)


def fmt_code(node: FormatCode, fmt: Formatter) -> None:
    """Write ``node`` to ``fmt``.

    Raises:
        RenderError: If ``node`` is not a renderable node, or the sink fails.
        BuilderError: If the tree violates a builder contract.
    """
    match node:
        case str():
            fmt.writeln(node)
        case Type():
            fmt_type(node, fmt)
        case Docs():
            _fmt_docs(node, fmt)
        case Fields():
            _fmt_fields(node, fmt)
        case Block():
            _fmt_block(node, fmt)
        case Variant():
            _fmt_variant(node, fmt)
        case Function():
            _fmt_function(node, fmt, is_trait=False)
        case Struct():
            _fmt_struct(node, fmt)
        case Enum():
            _fmt_enum(node, fmt)
        case Trait():
            _fmt_trait(node, fmt)
        case Impl():
            _fmt_impl(node, fmt)
        case Module():
            _fmt_module(node, fmt)
        case Scope():
            _fmt_scope(node, fmt)
        case _:
            raise RenderError(f"cannot render {type(node).__name__!r} object")


def render(node: FormatCode, sink: TextSink, *, config: FormatConfig | None = None) -> None:
    """Render ``node`` into ``sink``.

    Args:
        node: Node to render.
        sink: Destination with a ``write(str)`` method.
        config: Format configuration; the context's active config if None.

    Raises:
        RenderError: If the sink refuses a write. Partial output must be discarded.
    """
    fmt = Formatter(sink, config)
    logger.debug("Rendering %s (indent=%d)", type(node).__name__, fmt.indent)
    fmt_code(node, fmt)
    logger.debug("Rendered %s", type(node).__name__)


def to_string(node: FormatCode, *, config: FormatConfig | None = None) -> str:
    """Render ``node`` to a string."""
    sb = StringBuilder()
    render(node, sb, config=config)
    return sb.build()


# =============================================================================
# Leaves
# =============================================================================


def _fmt_docs(docs: Docs, fmt: Formatter) -> None:
    for line in docs.lines():
        fmt.writeln(f"{DOC_MARKER} {line}")


def _fmt_fields(fields: Fields, fmt: Formatter, close: str = "") -> None:
    match fields.kind:
        case FieldsKind.NAMED:
            if not fields.named_fields:
                raise BuilderError("Fields", "named field list is empty")

            def write_named(fmt: Formatter) -> None:
                for member in fields.named_fields:
                    for doc in member.documentation:
                        fmt.writeln(f"{DOC_MARKER} {doc}")
                    for annotation in member.annotation:
                        fmt.writeln(annotation)
                    fmt.write(f"{member.name}: ")
                    fmt_type(member.ty, fmt)
                    fmt.writeln(",")

            fmt.block(write_named, suffix=close)
        case FieldsKind.TUPLE:
            if not fields.tuple_fields:
                raise BuilderError("Fields", "tuple field list is empty")

            fmt.write("(")
            for i, ty in enumerate(fields.tuple_fields):
                if i != 0:
                    fmt.write(", ")
                fmt_type(ty, fmt)
            fmt.write(")")
        case FieldsKind.EMPTY:
            pass


def _fmt_block(block: Block, fmt: Formatter) -> None:
    if block.before:
        fmt.write(block.before)

    def write_body(fmt: Formatter) -> None:
        for entry in block.body:
            fmt_code(entry, fmt)

    fmt.block(write_body, suffix=block.tail)


# =============================================================================
# Declarations
# =============================================================================


def _fmt_attrs(attributes: list[str], fmt: Formatter) -> None:
    for attribute in attributes:
        fmt.writeln(attribute)


def _fmt_head(head: TypeDef, keyword: str, parents: list[Type], fmt: Formatter) -> None:
    if head.docs is not None:
        _fmt_docs(head.docs, fmt)
    for allow in head.allowed:
        fmt.writeln(f"#[allow({allow})]")
    if head.derives:
        fmt.writeln(f"#[derive({', '.join(head.derives)})]")
    if head.repr_hint is not None:
        fmt.writeln(f"#[repr({head.repr_hint})]")
    _fmt_attrs(head.attributes, fmt)

    if head.visibility is not None:
        fmt.write(f"{head.visibility} ")
    fmt.write(f"{keyword} ")
    fmt_type(head.ty, fmt)

    if parents:
        fmt.write(": ")
        fmt_bound_rhs(parents, fmt)

    fmt_bounds(head.bounds, fmt)


def _fmt_struct(struct: Struct, fmt: Formatter) -> None:
    _fmt_head(struct, "struct", [], fmt)
    _fmt_fields(struct.fields, fmt)

    # Named fields close with the block; the other forms need a terminator.
    if struct.fields.kind is not FieldsKind.NAMED:
        fmt.writeln(";")


def _fmt_variant(variant: Variant, fmt: Formatter) -> None:
    _fmt_attrs(variant.annotations, fmt)
    fmt.write(variant.name)

    if variant.fields.kind is FieldsKind.NAMED:
        _fmt_fields(variant.fields, fmt, close=",")
    else:
        _fmt_fields(variant.fields, fmt)
        fmt.writeln(",")


def _fmt_enum(enum: Enum, fmt: Formatter) -> None:
    _fmt_head(enum, "enum", [], fmt)

    def write_variants(fmt: Formatter) -> None:
        for variant in enum.variants:
            _fmt_variant(variant, fmt)

    fmt.block(write_variants)


def _fmt_function(func: Function, fmt: Formatter, *, is_trait: bool) -> None:
    if func.docs is not None:
        _fmt_docs(func.docs, fmt)
    for allow in func.allowed:
        fmt.writeln(f"#[allow({allow})]")
    _fmt_attrs(func.attributes, fmt)

    if is_trait and func.visibility is not None:
        raise BuilderError("Function", f"trait fn {func.name!r} cannot have a visibility modifier")

    if func.visibility is not None:
        fmt.write(f"{func.visibility} ")
    if func.abi is not None:
        fmt.write(f'extern "{func.abi}" ')
    if func.is_async:
        fmt.write("async ")

    fmt.write(f"fn {func.name}")
    fmt_generics(func.generics, fmt)

    fmt.write("(")
    if func.self_arg is not None:
        fmt.write(func.self_arg)
    for i, arg in enumerate(func.args):
        if i != 0 or func.self_arg is not None:
            fmt.write(", ")
        fmt.write(f"{arg.name}: ")
        fmt_type(arg.ty, fmt)
    fmt.write(")")

    if func.ret_type is not None:
        fmt.write(" -> ")
        fmt_type(func.ret_type, fmt)

    fmt_bounds(func.bounds, fmt)

    if func.body is None:
        if not is_trait:
            raise BuilderError("Function", f"fn {func.name!r} outside a trait must have a body")
        fmt.writeln(";")
        return

    body = func.body

    def write_body(fmt: Formatter) -> None:
        for entry in body:
            fmt_code(entry, fmt)

    fmt.block(write_body)


def _fmt_trait(trait: Trait, fmt: Formatter) -> None:
    _fmt_head(trait, "trait", trait.parents, fmt)

    def write_members(fmt: Formatter) -> None:
        for assoc in trait.associated_types:
            fmt.write(f"type {assoc.name}")
            if assoc.bounds:
                fmt.write(": ")
                fmt_bound_rhs(assoc.bounds, fmt)
            fmt.writeln(";")

        for i, func in enumerate(trait.fns):
            if i != 0 or trait.associated_types:
                fmt.writeln()
            _fmt_function(func, fmt, is_trait=True)

    fmt.block(write_members)


def _fmt_impl(impl: Impl, fmt: Formatter) -> None:
    _fmt_attrs(impl.attributes, fmt)

    fmt.write("impl")
    fmt_generics(impl.generics, fmt)

    if impl.trait_type is not None:
        fmt.write(" ")
        fmt_type(impl.trait_type, fmt)
        fmt.write(" for")

    fmt.write(" ")
    fmt_type(impl.target, fmt)
    fmt_bounds(impl.bounds, fmt)

    def write_members(fmt: Formatter) -> None:
        for assoc in impl.associated_types:
            fmt.write(f"type {assoc.name} = ")
            fmt_type(assoc.ty, fmt)
            fmt.writeln(";")

        for i, func in enumerate(impl.fns):
            if i != 0 or impl.associated_types:
                fmt.writeln()
            _fmt_function(func, fmt, is_trait=False)

    fmt.block(write_members)


# =============================================================================
# Containers
# =============================================================================


def _fmt_module(module: Module, fmt: Formatter) -> None:
    if module.docs is not None:
        _fmt_docs(module.docs, fmt)
    _fmt_attrs(module.attributes, fmt)

    if module.visibility is not None:
        fmt.write(f"{module.visibility} ")
    fmt.write(f"mod {module.name}")
    fmt.block(lambda fmt: _fmt_scope(module.scope, fmt))


def _fmt_imports(scope: Scope, fmt: Formatter) -> None:
    visibilities: list[str | None] = []
    for imports in scope.imports.values():
        for entry in imports.values():
            if entry.visibility not in visibilities:
                visibilities.append(entry.visibility)

    for vis in visibilities:
        for path, imports in scope.imports.items():
            tys = [ty for ty, entry in imports.items() if entry.visibility == vis]
            if not tys:
                continue

            if vis is not None:
                fmt.write(f"{vis} ")
            if len(tys) > 1:
                fmt.writeln(f"use {path}::{{{', '.join(tys)}}};")
            else:
                fmt.writeln(f"use {path}::{tys[0]};")


def _fmt_scope(scope: Scope, fmt: Formatter) -> None:
    _fmt_imports(scope, fmt)
    if scope.imports:
        fmt.writeln()

    for i, item in enumerate(scope.items):
        if i != 0:
            fmt.writeln()
        fmt_code(item, fmt)


__all__ = [
    "FormatCode",
    "fmt_code",
    "render",
    "to_string",
]
