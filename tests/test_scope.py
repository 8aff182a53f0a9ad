"""Rendering tests for scopes, modules and imports."""

from rustgen import Module, Scope, to_string


class TestImports:
    def test_grouped_by_path_and_visibility(self) -> None:
        scope = Scope()
        scope.import_("std::collections", "HashMap")
        scope.import_("std::collections", "HashSet")
        scope.import_("std::fmt", "Debug").vis("pub")
        scope.import_("std::io", "Read")
        scope.new_struct("Foo")

        expect = r"""
use std::collections::{HashMap, HashSet};
use std::io::Read;
pub use std::fmt::Debug;

struct Foo;"""
        assert to_string(scope) == expect[1:]

    def test_repeated_import_returns_same_entry(self) -> None:
        scope = Scope()
        first = scope.import_("std::fmt", "Display")
        second = scope.import_("std::fmt", "Display")
        assert first is second
        assert first.line == "std::fmt::Display"

    def test_nested_type_is_keyed_by_first_segment(self) -> None:
        scope = Scope()
        scope.import_("std", "fmt::Debug")
        scope.import_("std", "io")
        assert to_string(scope) == "use std::{fmt, io};"


class TestItems:
    def test_raw_item(self) -> None:
        scope = Scope()
        scope.raw("const LIMIT: usize = 8;")
        scope.new_struct("Foo")
        assert to_string(scope) == "const LIMIT: usize = 8;\n\nstruct Foo;"

    def test_items_keep_insertion_order(self) -> None:
        scope = Scope()
        scope.new_trait("A")
        scope.new_enum("B")
        scope.new_struct("C")
        out = to_string(scope)
        assert out.index("trait A") < out.index("enum B") < out.index("struct C")

    def test_empty_scope(self) -> None:
        assert to_string(Scope()) == ""


class TestModules:
    def test_module_head(self) -> None:
        module = Module("net").vis("pub(crate)").doc("Networking.").attr("#[cfg(unix)]")
        module.new_struct("Socket")

        expect = r"""
/// Networking.
#[cfg(unix)]
pub(crate) mod net {
    struct Socket;
}"""
        assert str(module) == expect[1:]

    def test_nested_modules(self) -> None:
        scope = Scope()
        outer = scope.new_module("a")
        inner = outer.new_module("b")
        inner.new_fn("deep").line("0")

        expect = r"""
mod a {
    mod b {
        fn deep() {
            0
        }
    }
}"""
        assert to_string(scope) == expect[1:]

    def test_get_module(self) -> None:
        scope = Scope()
        created = scope.new_module("x")
        assert scope.get_module("x") is created
        assert scope.get_module("missing") is None

    def test_get_or_new_module(self) -> None:
        scope = Scope()
        first = scope.get_or_new_module("x")
        second = scope.get_or_new_module("x")
        assert first is second
        assert len(scope.items) == 1

    def test_push_into_module(self) -> None:
        scope = Scope()
        module = Module("m")
        scope.push_module(module)
        module.get_or_new_module("inner").new_struct("S")
        assert to_string(scope) == "mod m {\n    mod inner {\n        struct S;\n    }\n}"
