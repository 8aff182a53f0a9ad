"""
rustgen — Builder API and renderer for generating Rust source code

Build a tree of declarations with chaining builder methods, then render it to
consistently indented source text.

Quick Start:
    >>> from rustgen import Scope, to_string
    >>> scope = Scope()
    >>> _ = (
    ...     scope.new_struct("Foo")
    ...     .derive("Debug")
    ...     .field("one", "usize")
    ...     .field("two", "String")
    ... )
    >>> print(to_string(scope))
    #[derive(Debug)]
    struct Foo {
        one: usize,
        two: String,
    }

Rendering into a stream:
    >>> import io
    >>> out = io.StringIO()
    >>> render(scope, out)

Every node also renders with ``str(node)``.
"""

from rustgen.config import (
    DEFAULT_INDENT,
    FormatConfig,
    format_config_context,
    get_format_config,
    reset_format_config,
    set_format_config,
)
from rustgen.errors import BuilderError, RenderError, RustgenError
from rustgen.formatter import Formatter
from rustgen.layout import WHERE_LEAD, fmt_bound_rhs, fmt_bounds, fmt_generics, fmt_type
from rustgen.nodes import (
    AssociatedType,
    Block,
    Body,
    Bound,
    Docs,
    Enum,
    Field,
    Fields,
    FieldsKind,
    Function,
    Impl,
    ImplType,
    Import,
    Item,
    Module,
    Scope,
    Struct,
    Trait,
    Type,
    Variant,
)
from rustgen.protocols import TextSink
from rustgen.renderer import FormatCode, fmt_code, render, to_string
from rustgen.stringbuilder import StringBuilder

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_INDENT",
    "WHERE_LEAD",
    "AssociatedType",
    "Block",
    "Body",
    "Bound",
    "BuilderError",
    "Docs",
    "Enum",
    "Field",
    "Fields",
    "FieldsKind",
    "FormatCode",
    "FormatConfig",
    "Formatter",
    "Function",
    "Impl",
    "ImplType",
    "Import",
    "Item",
    "Module",
    "RenderError",
    "RustgenError",
    "Scope",
    "StringBuilder",
    "Struct",
    "TextSink",
    "Trait",
    "Type",
    "Variant",
    "fmt_bound_rhs",
    "fmt_bounds",
    "fmt_code",
    "fmt_generics",
    "fmt_type",
    "format_config_context",
    "get_format_config",
    "render",
    "reset_format_config",
    "set_format_config",
    "to_string",
]
