"""Error-path tests.

Covers the error hierarchy, contract violations raised while building a tree,
and failures surfaced while rendering one.
"""

import pytest

from rustgen import (
    BuilderError,
    Fields,
    FieldsKind,
    RenderError,
    RustgenError,
    Scope,
    StringBuilder,
    Struct,
    Type,
    render,
    to_string,
)

# =========================================================================
# Error hierarchy
# =========================================================================


class TestErrorHierarchy:
    def test_render_error_is_rustgen_error(self) -> None:
        assert isinstance(RenderError("x"), RustgenError)

    def test_builder_error_format(self) -> None:
        err = BuilderError("Fields", "field list is named")
        assert str(err) == "Fields: field list is named"
        assert err.node == "Fields"
        assert err.message == "field list is named"
        assert isinstance(err, RustgenError)


# =========================================================================
# Contract violations
# =========================================================================


class TestBuilderContracts:
    def test_struct_mixing_field_kinds(self) -> None:
        struct = Struct("Foo").field("a", "u8")
        with pytest.raises(BuilderError):
            struct.tuple_field("u8")

    def test_struct_mixing_field_kinds_other_way(self) -> None:
        struct = Struct("Foo").tuple_field("u8")
        with pytest.raises(BuilderError):
            struct.field("a", "u8")

    def test_generic_on_type_with_inline_generics(self) -> None:
        with pytest.raises(BuilderError, match="generics"):
            Type("Vec<T>").generic("U")

    def test_path_on_qualified_type(self) -> None:
        with pytest.raises(BuilderError, match="path"):
            Type("std::fmt::Debug").path("core")

    def test_empty_named_fields_in_struct(self) -> None:
        struct = Struct("Foo")
        struct.fields = Fields(FieldsKind.NAMED)
        with pytest.raises(BuilderError):
            to_string(struct)


# =========================================================================
# Render failures
# =========================================================================


class _FailingSink:
    def __init__(self, limit: int) -> None:
        self.written: list[str] = []
        self.limit = limit

    def write(self, s: str) -> int:
        if len(self.written) >= self.limit:
            raise OSError("sink exhausted")
        self.written.append(s)
        return len(s)


class TestRenderFailures:
    def test_unknown_node_type(self) -> None:
        with pytest.raises(RenderError, match="int"):
            to_string(42)  # type: ignore[arg-type]

    def test_unknown_item_in_scope(self) -> None:
        scope = Scope()
        scope.items.append(object())  # type: ignore[arg-type]
        with pytest.raises(RenderError):
            to_string(scope)

    def test_sink_failure_midway_aborts(self) -> None:
        scope = Scope()
        scope.new_module("m").new_struct("S").field("a", "u8").field("b", "u8")
        sink = _FailingSink(limit=5)
        with pytest.raises(RenderError) as exc_info:
            render(scope, sink)
        assert isinstance(exc_info.value.__cause__, OSError)
        assert len(sink.written) == 5

    def test_sink_failure_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("DEBUG", logger="rustgen"), pytest.raises(RenderError):
            render(Struct("S"), _FailingSink(limit=0))
        assert any("Sink rejected" in r.message for r in caplog.records)

    def test_render_logs_start_and_finish(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("DEBUG", logger="rustgen"):
            to_string(Struct("S"))
        messages = [r.getMessage() for r in caplog.records]
        assert "Rendering Struct (indent=4)" in messages
        assert "Rendered Struct" in messages

    def test_render_into_string_builder(self) -> None:
        sb = StringBuilder()
        render(Struct("S"), sb)
        assert sb.build() == "struct S;"
