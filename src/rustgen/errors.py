"""Exception classes for rustgen.

Provides standardized exceptions for error handling throughout rustgen.
"""

from __future__ import annotations


class RustgenError(Exception):
    """Base exception for all rustgen errors.
    
    Subclass this for specific error categories.
    """

    pass


class RenderError(RustgenError):
    """Error during rendering.
    
    Raised when the destination sink refuses a write, or when an object
    outside the closed set of renderable nodes reaches the renderer.
    A render that raises this leaves partial output that should be discarded.
    """

    pass


class BuilderError(RustgenError):
    """Caller contract violation while building or rendering a tree.
    
    Raised at the point of violation (e.g. mixing tuple and named fields,
    rendering an empty field list, an impl function without a body).
    These are programmer errors and are never caught internally.
    """

    def __init__(self, node: str, message: str) -> None:
        """Initialize builder error.
        
        Args:
            node: Kind of node whose contract was violated (e.g. "Fields")
            message: Description of the violation
        """
        self.node = node
        self.message = message
        super().__init__(f"{node}: {message}")
