"""Edge types accepted by WeightedGraph."""

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

__all__ = ["Edge", "WeightedEdge"]

V = TypeVar("V", bound=Hashable)


class Edge(Protocol[V]):
    """Undirected weighted edge contract.

    Implementations must be hashable and ordered by ``<`` (normally by
    weight) so they can be sorted by the top-k selector.
    """

    @property
    def vertex1(self) -> V: ...

    @property
    def vertex2(self) -> V: ...

    @property
    def weight(self) -> float: ...

    def other_vertex(self, vertex: V) -> V: ...

    def __lt__(self, other: Any) -> bool: ...

    def __hash__(self) -> int: ...


@dataclass(frozen=True)
class WeightedEdge(Generic[V]):
    """Immutable undirected edge ordered by weight.

    Equality compares endpoints and weight, ordering compares weight only.

    Attributes
    ----------
    vertex1 : V
        First endpoint.
    vertex2 : V
        Second endpoint (may equal ``vertex1`` for a self-loop).
    weight : float
        Edge weight.
    """

    vertex1: V
    vertex2: V
    weight: float

    def __lt__(self, other: "WeightedEdge[V]") -> bool:
        if not isinstance(other, WeightedEdge):
            return NotImplemented
        return self.weight < other.weight

    def other_vertex(self, vertex: V) -> V:
        """Return the endpoint opposite ``vertex``.

        Parameters
        ----------
        vertex : V
            One of the two endpoints.

        Returns
        -------
        V
            The other endpoint (``vertex`` itself for a self-loop).

        Raises
        ------
        ValueError
            If ``vertex`` is not an endpoint of this edge.
        """
        if vertex == self.vertex1:
            return self.vertex2
        if vertex == self.vertex2:
            return self.vertex1
        raise ValueError(f"{vertex!r} is not an endpoint of {self!r}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary.

        Returns
        -------
        dict[str, Any]
            Dictionary representation.
        """
        return {"u": self.vertex1, "v": self.vertex2, "weight": self.weight}
