"""Rendering tests for enums and variants."""

from rustgen import Enum, Scope, Variant, to_string


class TestEnum:
    def test_variant_kinds(self) -> None:
        enum = Enum("Shape").vis("pub").derive("Debug")
        enum.new_variant("Unit")
        enum.new_variant("Circle").tuple("f64")
        enum.new_variant("Rect").named("w", "f64").named("h", "f64")

        expect = r"""
#[derive(Debug)]
pub enum Shape {
    Unit,
    Circle(f64),
    Rect {
        w: f64,
        h: f64,
    },
}"""
        assert str(enum) == expect[1:]

    def test_variant_annotations(self) -> None:
        enum = Enum("Mode")
        enum.push_variant(Variant("Fast").annotate(["#[default]"]))
        enum.new_variant("Slow").annotate(['#[serde(rename = "slow")]'])

        expect = r"""
enum Mode {
    #[default]
    Fast,
    #[serde(rename = "slow")]
    Slow,
}"""
        assert str(enum) == expect[1:]

    def test_generic_enum_with_bounds(self) -> None:
        enum = Enum("Either").generic("L").generic("R").bound("L", "Clone")
        enum.new_variant("Left").tuple("L")
        enum.new_variant("Right").tuple("R")

        expect = r"""
enum Either<L, R>
where L: Clone,
{
    Left(L),
    Right(R),
}"""
        assert str(enum) == expect[1:]

    def test_enum_in_module(self) -> None:
        scope = Scope()
        enum = scope.new_module("kinds").vis("pub").new_enum("Kind").repr("u8")
        enum.new_variant("A")
        enum.new_variant("B")

        expect = r"""
pub mod kinds {
    #[repr(u8)]
    enum Kind {
        A,
        B,
    }
}"""
        assert to_string(scope) == expect[1:]

    def test_single_variant_renders_alone(self) -> None:
        assert str(Variant("Pair").tuple("u8").tuple("u8")) == "Pair(u8, u8),"
