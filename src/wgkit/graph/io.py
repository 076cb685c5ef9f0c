"""Load graphs from JSON documents.

A graph document looks like::

    {"vertices": ["A", "B"], "edges": [{"u": "A", "v": "B", "weight": 1.5}]}

and is validated against the bundled ``graph.schema.json`` before any
graph is built.
"""

import json
from collections.abc import Iterable
from functools import cache
from pathlib import Path
from typing import Any

import jsonschema

from wgkit.errors import GraphFormatError
from wgkit.graph.models import WeightedEdge
from wgkit.graph.weighted_graph import WeightedGraph

__all__ = [
    "GRAPH_SCHEMA_PATH",
    "edges_to_dicts",
    "graph_from_dict",
    "load_graph",
]

GRAPH_SCHEMA_PATH = Path(__file__).parent.parent / "schemas" / "graph.schema.json"

Vertex = str | int


@cache
def _graph_schema() -> dict[str, Any]:
    with GRAPH_SCHEMA_PATH.open(encoding="utf-8") as f:
        return json.load(f)


def graph_from_dict(
    data: dict[str, Any],
    *,
    source: str | None = None,
) -> WeightedGraph[Vertex, WeightedEdge[Vertex]]:
    """Build a graph from a parsed graph document.

    Parameters
    ----------
    data : dict[str, Any]
        Parsed JSON document.
    source : str | None, optional
        File the document came from, reported in errors.

    Returns
    -------
    WeightedGraph[Vertex, WeightedEdge[Vertex]]
        Graph with one ``WeightedEdge`` per edge entry.

    Raises
    ------
    GraphFormatError
        If the document does not match the graph schema.
    InvalidEdgeError
        If an edge has a negative weight or an unknown endpoint.
    """
    try:
        jsonschema.validate(instance=data, schema=_graph_schema())
    except jsonschema.ValidationError as e:
        location = "/".join(str(part) for part in e.absolute_path) or "<root>"
        raise GraphFormatError(f"Invalid graph document at {location}: {e.message}", file=source) from e

    edges = [WeightedEdge(entry["u"], entry["v"], float(entry["weight"])) for entry in data["edges"]]
    return WeightedGraph(data["vertices"], edges)


def load_graph(path: str | Path) -> WeightedGraph[Vertex, WeightedEdge[Vertex]]:
    """Load and validate a graph document from a JSON file.

    Parameters
    ----------
    path : str | Path
        Path to JSON file.

    Returns
    -------
    WeightedGraph[Vertex, WeightedEdge[Vertex]]
        Loaded graph.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    GraphFormatError
        If the file is not valid UTF-8 JSON or does not match the schema.
    """
    file_path = Path(path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    try:
        with file_path.open(encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise GraphFormatError(f"Malformed JSON in {file_path.name}: {e}", file=str(file_path)) from e

    return graph_from_dict(data, source=str(file_path))


def edges_to_dicts(edges: Iterable[WeightedEdge[Vertex]]) -> list[dict[str, Any]]:
    """Convert edges to JSON-ready dictionaries."""
    return [edge.to_dict() for edge in edges]
