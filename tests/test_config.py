"""Tests for ContextVar-based format configuration.

Validates config immutability, context manager behavior, and thread isolation.
"""

from threading import Thread

import pytest

from rustgen import (
    DEFAULT_INDENT,
    FormatConfig,
    Scope,
    format_config_context,
    get_format_config,
    reset_format_config,
    set_format_config,
    to_string,
)


def nested_scope() -> Scope:
    scope = Scope()
    scope.new_module("m").new_struct("S").field("a", "u8")
    return scope


class TestFormatConfigDataclass:
    def test_default_values(self) -> None:
        assert FormatConfig().indent == DEFAULT_INDENT

    def test_immutability(self) -> None:
        config = FormatConfig()
        with pytest.raises(AttributeError):
            config.indent = 2  # type: ignore[misc]

    def test_negative_indent_rejected(self) -> None:
        with pytest.raises(ValueError):
            FormatConfig(indent=-1)

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = FormatConfig.from_dict({"indent": 2, "unknown": True})
        assert config.indent == 2


class TestContextVarFunctions:
    def test_set_and_reset(self) -> None:
        try:
            set_format_config(FormatConfig(indent=2))
            assert get_format_config().indent == 2
        finally:
            reset_format_config()
        assert get_format_config().indent == DEFAULT_INDENT

    def test_context_manager_restores(self) -> None:
        with format_config_context(FormatConfig(indent=8)):
            assert get_format_config().indent == 8
        assert get_format_config().indent == DEFAULT_INDENT

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError), format_config_context(FormatConfig(indent=8)):
            raise RuntimeError("boom")
        assert get_format_config().indent == DEFAULT_INDENT


class TestConfigAffectsRendering:
    def test_explicit_config(self) -> None:
        out = to_string(nested_scope(), config=FormatConfig(indent=2))
        assert out == "mod m {\n  struct S {\n    a: u8,\n  }\n}"

    def test_context_config(self) -> None:
        with format_config_context(FormatConfig(indent=1)):
            out = to_string(nested_scope())
        assert out == "mod m {\n struct S {\n  a: u8,\n }\n}"

    def test_explicit_config_wins_over_context(self) -> None:
        with format_config_context(FormatConfig(indent=1)):
            out = to_string(nested_scope(), config=FormatConfig(indent=4))
        assert "\n    struct S {" in out

    def test_threads_are_isolated(self) -> None:
        results: dict[str, str] = {}

        def worker() -> None:
            set_format_config(FormatConfig(indent=2))
            results["thread"] = to_string(nested_scope())

        thread = Thread(target=worker)
        thread.start()
        thread.join()
        results["main"] = to_string(nested_scope())

        assert "\n  struct S {" in results["thread"]
        assert "\n    struct S {" in results["main"]
