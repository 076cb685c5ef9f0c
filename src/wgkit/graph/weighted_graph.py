"""Undirected weighted graph with MST and shortest-path queries."""

import itertools
import math
import random
from collections.abc import Hashable, Iterable, Sequence
from typing import Generic, TypeVar

from wgkit.config import TieBreakPolicy
from wgkit.errors import InvalidEdgeError, NoPathExistsError, UnknownElementError
from wgkit.graph.models import Edge
from wgkit.structures.disjoint_set import DisjointSet
from wgkit.structures.heap import BoundedHeap
from wgkit.structures.selection import top_k

__all__ = ["WeightedGraph"]

V = TypeVar("V", bound=Hashable)
E = TypeVar("E", bound=Edge)


class WeightedGraph(Generic[V, E]):
    """Immutable undirected weighted graph.

    May contain self-loops, parallel edges and disconnected components.
    Queries build their own working structures and never change the graph.

    Examples
    --------
        >>> from wgkit.graph.models import WeightedEdge
        >>> ab, bc, ac = (WeightedEdge("A", "B", 1), WeightedEdge("B", "C", 2),
        ...               WeightedEdge("A", "C", 5))
        >>> graph = WeightedGraph(["A", "B", "C"], [ab, bc, ac])
        >>> graph.shortest_path("A", "C") == [ab, bc]
        True
    """

    def __init__(self, vertices: Iterable[V], edges: Iterable[E]) -> None:
        """Build the adjacency index and validate every edge.

        Parameters
        ----------
        vertices : Iterable[V]
            Hashable vertices. Equal vertices are kept once.
        edges : Iterable[E]
            Edges between the given vertices. Equal edges are kept once in
            the working edge list but all of them count towards
            ``num_edges()``.

        Raises
        ------
        InvalidEdgeError
            If an edge has a negative or NaN weight or an endpoint that is not
            among ``vertices``.
        """
        self._adjacency: dict[V, list[E]] = {vertex: [] for vertex in vertices}
        self._edges: list[E] = []
        self._num_edges = 0

        seen: set[E] = set()
        for edge in edges:
            self._num_edges += 1
            self._validate_edge(edge)
            if edge in seen:
                continue
            seen.add(edge)
            self._edges.append(edge)
            self._adjacency[edge.vertex1].append(edge)
            if edge.vertex2 != edge.vertex1:
                self._adjacency[edge.vertex2].append(edge)

    def _validate_edge(self, edge: E) -> None:
        if not edge.weight >= 0:
            raise InvalidEdgeError(f"Edge weight must be >= 0: {edge!r}", edge=edge)
        for endpoint in (edge.vertex1, edge.vertex2):
            if endpoint not in self._adjacency:
                raise InvalidEdgeError(
                    f"Edge endpoint {endpoint!r} is not a vertex: {edge!r}",
                    edge=edge,
                )

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def num_vertices(self) -> int:
        """Return the number of vertices."""
        return len(self._adjacency)

    def num_edges(self) -> int:
        """Return the number of edges the graph was built from."""
        return self._num_edges

    def vertices(self) -> list[V]:
        """Return the vertices in insertion order."""
        return list(self._adjacency)

    def edges(self) -> list[E]:
        """Return the distinct edges in insertion order."""
        return list(self._edges)

    def incident_edges(self, vertex: V) -> list[E]:
        """Return the distinct edges touching ``vertex``.

        Raises
        ------
        UnknownElementError
            If ``vertex`` is not in the graph.
        """
        try:
            return list(self._adjacency[vertex])
        except KeyError:
            raise UnknownElementError(vertex) from None

    def minimum_spanning_tree(
        self,
        policy: TieBreakPolicy = TieBreakPolicy.RANDOM,
        rng: random.Random | None = None,
    ) -> set[E]:
        """Return the edges of a minimum spanning tree (Kruskal).

        Edges are visited in ascending weight order and kept whenever they
        join two different components. When several minimum trees exist any
        one of them is returned. A disconnected graph yields a spanning
        forest.

        Parameters
        ----------
        policy : TieBreakPolicy, optional
            Tie-break policy of the working disjoint set.
        rng : random.Random | None, optional
            Pseudo-random source for the RANDOM policy.

        Returns
        -------
        set[E]
            Tree edges; ``num_vertices() - 1`` of them on a connected graph.
        """
        components: DisjointSet[V] = DisjointSet(policy=policy, rng=rng)
        for vertex in self._adjacency:
            components.make_set(vertex)

        tree: set[E] = set()
        for edge in top_k(len(self._edges), self._edges):
            if components.find_set(edge.vertex1) != components.find_set(edge.vertex2):
                components.union(edge.vertex1, edge.vertex2)
                tree.add(edge)
        return tree

    def shortest_path(self, start: V, end: V) -> list[E]:
        """Return the edges of a shortest path from ``start`` to ``end``.

        Dijkstra with a best-known distance per vertex and one shared heap
        with lazy deletion: an entry whose distance is above the vertex's
        best-known distance is stale and skipped when popped. Distances only
        ever decrease and the search stops as soon as ``end`` is settled.
        Self-loops are never relaxed.

        Parameters
        ----------
        start : V
            Source vertex.
        end : V
            Target vertex.

        Returns
        -------
        list[E]
            Edges from ``start`` to ``end``; empty when they are equal.

        Raises
        ------
        UnknownElementError
            If ``start`` or ``end`` is not in the graph.
        NoPathExistsError
            If ``end`` cannot be reached from ``start``.
        """
        for vertex in (start, end):
            if vertex not in self._adjacency:
                raise UnknownElementError(vertex)

        if start == end:
            return []

        best: dict[V, float] = {start: 0.0}
        predecessor: dict[V, E] = {}
        settled: set[V] = set()
        # Sequence numbers keep vertices out of tuple comparisons.
        sequence = itertools.count()
        queue: BoundedHeap[tuple[float, int, V]] = BoundedHeap()
        queue.insert((0.0, next(sequence), start))

        while queue:
            distance, _, vertex = queue.remove_min()
            if vertex in settled or distance > best[vertex]:
                continue

            if vertex == end:
                return self._trace_path(start, end, predecessor)

            for edge in self._adjacency[vertex]:
                if edge.vertex1 == edge.vertex2:
                    continue
                neighbor = edge.other_vertex(vertex)
                if neighbor in settled:
                    continue
                candidate = distance + edge.weight
                if candidate < best.get(neighbor, math.inf):
                    best[neighbor] = candidate
                    predecessor[neighbor] = edge
                    queue.insert((candidate, next(sequence), neighbor))

            settled.add(vertex)

        raise NoPathExistsError(start, end)

    @staticmethod
    def _trace_path(start: V, end: V, predecessor: dict[V, E]) -> list[E]:
        path: list[E] = []
        vertex = end
        while vertex != start:
            edge = predecessor[vertex]
            path.append(edge)
            vertex = edge.other_vertex(vertex)
        path.reverse()
        return path

    @staticmethod
    def path_weight(path: Sequence[E]) -> float:
        """Return the total weight of a sequence of edges."""
        return sum((edge.weight for edge in path), 0.0)
