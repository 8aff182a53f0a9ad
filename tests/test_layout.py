"""Tests for generic parameter lists and where clauses."""

from rustgen import (
    WHERE_LEAD,
    Bound,
    Formatter,
    StringBuilder,
    Type,
    fmt_bound_rhs,
    fmt_bounds,
    fmt_generics,
    fmt_type,
)


def run(write) -> str:
    sb = StringBuilder()
    write(Formatter(sb))
    return sb.build()


class TestGenerics:
    def test_empty_renders_nothing(self) -> None:
        assert run(lambda f: fmt_generics([], f)) == ""

    def test_joined_with_comma(self) -> None:
        assert run(lambda f: fmt_generics(["T", "U", "'a"], f)) == "<T, U, 'a>"


class TestTypes:
    def test_plain(self) -> None:
        assert run(lambda f: fmt_type(Type("usize"), f)) == "usize"

    def test_nested_generics(self) -> None:
        ty = Type("Result").generic(Type("Vec").generic("T")).generic("io::Error")
        assert run(lambda f: fmt_type(ty, f)) == "Result<Vec<T>, io::Error>"

    def test_path(self) -> None:
        ty = Type("Debug").path("std::fmt")
        assert ty.name == "std::fmt::Debug"
        assert str(ty) == "std::fmt::Debug"


class TestBounds:
    def test_empty_renders_nothing(self) -> None:
        assert run(lambda f: fmt_bounds([], f)) == ""

    def test_rhs_joined_with_plus(self) -> None:
        tys = [Type("Clone"), Type("Send"), Type("'static")]
        assert run(lambda f: fmt_bound_rhs(tys, f)) == "Clone + Send + 'static"

    def test_where_clause_rows(self) -> None:
        bounds = [
            Bound("T", [Type("Clone"), Type("Debug")]),
            Bound("U", [Type("Default")]),
            Bound("V", [Type("Iterator").generic("Item = T")]),
        ]

        def write(f: Formatter) -> None:
            f.write("fn foo<T, U, V>()")
            fmt_bounds(bounds, f)

        expect = r"""
fn foo<T, U, V>()
where T: Clone + Debug,
      U: Default,
      V: Iterator<Item = T>,"""
        assert run(write) == expect[1:]

    def test_continuation_aligns_with_where_width(self) -> None:
        bounds = [Bound("A", [Type("X")]), Bound("B", [Type("Y")])]
        lines = run(lambda f: fmt_bounds(bounds, f)).splitlines()
        assert lines[-1].startswith(" " * len(WHERE_LEAD) + "B")

    def test_continuation_alignment_is_relative_to_indent(self) -> None:
        bounds = [Bound("A", [Type("X")]), Bound("B", [Type("Y")])]

        def write(f: Formatter) -> None:
            with f.indented():
                f.write("struct S<A, B>")
                fmt_bounds(bounds, f)

        expect = r"""
    struct S<A, B>
    where A: X,
          B: Y,"""
        assert run(write) == expect[1:]
