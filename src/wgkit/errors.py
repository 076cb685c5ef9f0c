"""Exception types raised by wgkit.

Every error derives from ``WgkitError`` and from the closest builtin, so
callers can catch either the library-specific type or the builtin one.
"""

from typing import Any

__all__ = [
    "WgkitError",
    "DuplicateElementError",
    "UnknownElementError",
    "SameComponentError",
    "EmptyHeapError",
    "InvalidArgumentError",
    "InvalidEdgeError",
    "NoPathExistsError",
    "GraphFormatError",
]


class WgkitError(Exception):
    """Base class for all wgkit errors."""


class DuplicateElementError(WgkitError, ValueError):
    """Raised when an item is registered twice in a disjoint set."""

    def __init__(self, item: Any) -> None:
        """Initialize duplicate element error.

        Parameters
        ----------
        item : Any
            Item that was already registered.
        """
        super().__init__(f"Item already registered: {item!r}")
        self.item = item


class UnknownElementError(WgkitError, LookupError):
    """Raised when an item was never registered."""

    def __init__(self, item: Any) -> None:
        """Initialize unknown element error.

        Parameters
        ----------
        item : Any
            Item that could not be found.
        """
        super().__init__(f"Unknown item: {item!r}")
        self.item = item


class SameComponentError(WgkitError, ValueError):
    """Raised when unioning two items that already share a component."""

    def __init__(self, item_a: Any, item_b: Any) -> None:
        """Initialize same component error.

        Parameters
        ----------
        item_a : Any
            First item passed to union.
        item_b : Any
            Second item passed to union.
        """
        super().__init__(f"Items already in the same component: {item_a!r}, {item_b!r}")
        self.item_a = item_a
        self.item_b = item_b


class EmptyHeapError(WgkitError, IndexError):
    """Raised on peek or remove from an empty heap."""


class InvalidArgumentError(WgkitError, ValueError):
    """Raised when an argument is outside its allowed range."""


class InvalidEdgeError(WgkitError, ValueError):
    """Raised when an edge has a negative or NaN weight or an unknown endpoint."""

    def __init__(self, message: str, edge: Any = None) -> None:
        """Initialize invalid edge error.

        Parameters
        ----------
        message : str
            Error message.
        edge : Any, optional
            Offending edge.
        """
        super().__init__(message)
        self.edge = edge


class NoPathExistsError(WgkitError):
    """Raised when no route connects the requested vertices."""

    def __init__(self, start: Any, end: Any) -> None:
        """Initialize no path error.

        Parameters
        ----------
        start : Any
            Start vertex.
        end : Any
            End vertex.
        """
        super().__init__(f"No path exists from {start!r} to {end!r}")
        self.start = start
        self.end = end


class GraphFormatError(WgkitError, ValueError):
    """Raised when a graph document does not match the graph schema."""

    def __init__(self, message: str, file: str | None = None) -> None:
        """Initialize graph format error.

        Parameters
        ----------
        message : str
            Error message.
        file : str | None, optional
            File where the error occurred.
        """
        super().__init__(message)
        self.file = file
