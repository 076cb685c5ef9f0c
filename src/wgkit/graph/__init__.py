"""Weighted graphs, edge types and JSON loading."""

from wgkit.graph.io import edges_to_dicts, graph_from_dict, load_graph
from wgkit.graph.models import Edge, WeightedEdge
from wgkit.graph.weighted_graph import WeightedGraph

__all__ = [
    "Edge",
    "WeightedEdge",
    "WeightedGraph",
    "edges_to_dicts",
    "graph_from_dict",
    "load_graph",
]
