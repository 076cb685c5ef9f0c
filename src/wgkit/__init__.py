"""Union-find, top-k selection and weighted-graph algorithms.

This package provides:
- Structures (wgkit.structures) — disjoint set, binary heap, top-k selection
- Graphs (wgkit.graph) — weighted graph, MST, shortest paths, JSON loading
- Mazes (wgkit.maze) — Kruskal maze carving and solving
- Audit (wgkit.audit) — JSONL event logging
- CLI (wgkit.cli) — command-line interface
"""

__version__ = "0.1.0"
__license__ = "MIT"

from wgkit.config import MazeConfig, TieBreakPolicy
from wgkit.errors import (
    DuplicateElementError,
    EmptyHeapError,
    GraphFormatError,
    InvalidArgumentError,
    InvalidEdgeError,
    NoPathExistsError,
    SameComponentError,
    UnknownElementError,
    WgkitError,
)
from wgkit.graph import WeightedEdge, WeightedGraph, load_graph
from wgkit.structures import BoundedHeap, DisjointSet, top_k

__all__ = [
    "__version__",
    "__license__",
    "BoundedHeap",
    "DisjointSet",
    "MazeConfig",
    "TieBreakPolicy",
    "WeightedEdge",
    "WeightedGraph",
    "load_graph",
    "top_k",
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
