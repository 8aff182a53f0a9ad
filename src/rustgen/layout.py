"""Layout helpers shared by every declaration with generics.

Generic parameter lists render inline (``<T, U>``). Where clauses start on a
new line and align continuation rows under the first bound:

    struct Foo<T, U>
    where T: Clone + Debug,
          U: Default,
    {

The continuation padding is the literal width of ``WHERE_LEAD``; it is text,
not an indentation level.

"""

from collections.abc import Sequence

from rustgen.formatter import Formatter
from rustgen.nodes.type import Bound, Type

WHERE_LEAD = "where "
_WHERE_PAD = " " * len(WHERE_LEAD)


def fmt_type(ty: Type, fmt: Formatter) -> None:
    """Format a type and its generic arguments."""
    fmt.write(ty.name)
    if ty.generics:
        fmt.write("<")
        for i, arg in enumerate(ty.generics):
            if i != 0:
                fmt.write(", ")
            fmt_type(arg, fmt)
        fmt.write(">")


def fmt_generics(generics: Sequence[str], fmt: Formatter) -> None:
    """Format generic parameter names; nothing at all when there are none."""
    if generics:
        fmt.write("<" + ", ".join(generics) + ">")


def fmt_bounds(bounds: Sequence[Bound], fmt: Formatter) -> None:
    """Format a where clause; nothing at all when there are no bounds."""
    if not bounds:
        return

    fmt.writeln()

    first, *rest = bounds
    fmt.write(f"{WHERE_LEAD}{first.name}: ")
    fmt_bound_rhs(first.bound, fmt)
    fmt.writeln(",")

    for bound in rest:
        fmt.write(f"{_WHERE_PAD}{bound.name}: ")
        fmt_bound_rhs(bound.bound, fmt)
        fmt.writeln(",")


def fmt_bound_rhs(tys: Sequence[Type], fmt: Formatter) -> None:
    """Format the types a bound requires, joined with ``+``."""
    for i, ty in enumerate(tys):
        if i != 0:
            fmt.write(" + ")
        fmt_type(ty, fmt)


__all__ = [
    "WHERE_LEAD",
    "fmt_bound_rhs",
    "fmt_bounds",
    "fmt_generics",
    "fmt_type",
]
