"""Core data structures: disjoint set, binary heap and top-k selection."""

from wgkit.structures.disjoint_set import DisjointSet
from wgkit.structures.heap import BoundedHeap
from wgkit.structures.selection import top_k

__all__ = [
    "BoundedHeap",
    "DisjointSet",
    "top_k",
]
