"""Function declarations."""

from __future__ import annotations

from dataclasses import dataclass, field

from rustgen.nodes.base import Renderable
from rustgen.nodes.block import Block, Body
from rustgen.nodes.docs import Docs
from rustgen.nodes.fields import Field
from rustgen.nodes.type import Bound, Type, as_type


@dataclass(slots=True)
class Function(Renderable):
    """A free function, method, or trait method signature.

    A new function has an empty body. Setting ``body`` to None leaves a
    signature terminated by ``;``, which is only valid inside a trait;
    ``Trait.new_fn`` does this for you.

    Attributes:
        name: Function name
        docs: Documentation rendered above the signature
        allowed: Lint names, rendered as ``#[allow(name)]``
        attributes: Attribute lines rendered verbatim
        visibility: Visibility modifier (``pub``, ``pub(crate)``)
        abi: ABI for ``extern "abi" fn``
        is_async: Render as ``async fn``
        generics: Generic parameter names
        self_arg: Receiver (``self``, ``&self``, ``&mut self``)
        args: Arguments after the receiver
        ret_type: Return type
        bounds: Where-clause rows
        body: Body entries, or None for a signature only

    """

    name: str
    docs: Docs | None = None
    allowed: list[str] = field(default_factory=list)
    attributes: list[str] = field(default_factory=list)
    visibility: str | None = None
    abi: str | None = None
    is_async: bool = False
    generics: list[str] = field(default_factory=list)
    self_arg: str | None = None
    args: list[Field] = field(default_factory=list)
    ret_type: Type | None = None
    bounds: list[Bound] = field(default_factory=list)
    body: list[Body] | None = field(default_factory=list)

    def doc(self, docs: str) -> Function:
        self.docs = Docs(docs)
        return self

    def allow(self, allow: str) -> Function:
        self.allowed.append(allow)
        return self

    def attr(self, attribute: str) -> Function:
        """Add an attribute line, e.g. ``#[inline]``."""
        self.attributes.append(attribute)
        return self

    def vis(self, vis: str) -> Function:
        self.visibility = vis
        return self

    def extern_abi(self, abi: str) -> Function:
        self.abi = abi
        return self

    def set_async(self, is_async: bool = True) -> Function:
        self.is_async = is_async
        return self

    def generic(self, name: str) -> Function:
        self.generics.append(name)
        return self

    def arg_self(self) -> Function:
        self.self_arg = "self"
        return self

    def arg_ref_self(self) -> Function:
        self.self_arg = "&self"
        return self

    def arg_mut_self(self) -> Function:
        self.self_arg = "&mut self"
        return self

    def arg(self, name: str, ty: Type | str) -> Function:
        self.args.append(Field(name, as_type(ty)))
        return self

    def ret(self, ty: Type | str) -> Function:
        self.ret_type = as_type(ty)
        return self

    def bound(self, name: str, ty: Type | str) -> Function:
        self.bounds.append(Bound(name, [as_type(ty)]))
        return self

    def line(self, line: str) -> Function:
        """Append a line to the body, creating the body if needed."""
        if self.body is None:
            self.body = []
        self.body.append(line)
        return self

    def push_block(self, block: Block) -> Function:
        """Append a nested block to the body, creating the body if needed."""
        if self.body is None:
            self.body = []
        self.body.append(block)
        return self
