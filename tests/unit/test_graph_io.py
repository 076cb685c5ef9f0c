"""Tests for loading graphs from JSON documents."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import jsonschema
import pytest

from wgkit.errors import GraphFormatError, InvalidEdgeError
from wgkit.graph import WeightedEdge, edges_to_dicts, graph_from_dict, load_graph
from wgkit.graph.io import GRAPH_SCHEMA_PATH


@pytest.fixture(scope="module")
def graph_schema() -> dict[str, Any]:
    """Load the bundled graph schema."""
    with GRAPH_SCHEMA_PATH.open() as f:
        return json.load(f)


@pytest.mark.unit
def test_schema_is_valid_draft(graph_schema: dict[str, Any]) -> None:
    """Test the bundled schema itself is a valid JSON Schema."""
    jsonschema.Draft202012Validator.check_schema(graph_schema)


@pytest.mark.unit
def test_graph_from_dict() -> None:
    """Test a valid document builds the expected graph."""
    graph = graph_from_dict(
        {
            "vertices": ["A", "B", "C"],
            "edges": [
                {"u": "A", "v": "B", "weight": 1},
                {"u": "B", "v": "C", "weight": 2.5},
            ],
        }
    )

    assert graph.num_vertices() == 3
    assert graph.edges() == [WeightedEdge("A", "B", 1.0), WeightedEdge("B", "C", 2.5)]


@pytest.mark.unit
def test_integer_vertices() -> None:
    """Test integer vertex ids are kept as integers."""
    graph = graph_from_dict({"vertices": [1, 2], "edges": [{"u": 1, "v": 2, "weight": 3}]})

    assert graph.shortest_path(1, 2) == [WeightedEdge(1, 2, 3.0)]


@pytest.mark.unit
@pytest.mark.parametrize(
    "document",
    [
        {"vertices": ["A"]},
        {"vertices": ["A", "B"], "edges": [{"u": "A", "v": "B", "weight": "heavy"}]},
        {"vertices": ["A", "B"], "edges": [{"u": "A", "v": "B"}]},
        {"vertices": [["A"]], "edges": []},
        {"vertices": [], "edges": [], "directed": True},
    ],
)
def test_schema_violations(document: dict[str, Any]) -> None:
    """Test documents outside the schema raise GraphFormatError."""
    with pytest.raises(GraphFormatError, match="Invalid graph document"):
        graph_from_dict(document)


@pytest.mark.unit
def test_negative_weight_passes_schema_but_fails_graph() -> None:
    """Test negative weights are caught by graph validation."""
    with pytest.raises(InvalidEdgeError):
        graph_from_dict({"vertices": ["A", "B"], "edges": [{"u": "A", "v": "B", "weight": -1}]})


@pytest.mark.unit
def test_load_graph(write_graph: Callable[..., Path]) -> None:
    """Test loading a graph from a file."""
    path = write_graph(["A", "B"], [("A", "B", 4)])

    graph = load_graph(path)

    assert graph.minimum_spanning_tree() == {WeightedEdge("A", "B", 4.0)}


@pytest.mark.unit
def test_load_graph_missing_file(tmp_path: Path) -> None:
    """Test a missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_graph(tmp_path / "nope.json")


@pytest.mark.unit
def test_load_graph_malformed_json(tmp_path: Path) -> None:
    """Test broken JSON raises GraphFormatError naming the file."""
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(GraphFormatError) as exc_info:
        load_graph(path)

    assert exc_info.value.file == str(path)


@pytest.mark.unit
def test_load_graph_nan_weight(tmp_path: Path) -> None:
    """Test a bare NaN weight literal is rejected as an invalid edge."""
    path = tmp_path / "nan.json"
    path.write_text('{"vertices": ["A", "B"], "edges": [{"u": "A", "v": "B", "weight": NaN}]}', encoding="utf-8")

    with pytest.raises(InvalidEdgeError):
        load_graph(path)


@pytest.mark.unit
def test_load_graph_invalid_utf8(tmp_path: Path) -> None:
    """Test bytes that are not UTF-8 raise GraphFormatError naming the file."""
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"vertices": ["\xff"], "edges": []}')

    with pytest.raises(GraphFormatError) as exc_info:
        load_graph(path)

    assert exc_info.value.file == str(path)


@pytest.mark.unit
def test_edges_to_dicts() -> None:
    """Test edges serialize to the document edge format."""
    assert edges_to_dicts([WeightedEdge("A", "B", 1.0)]) == [{"u": "A", "v": "B", "weight": 1.0}]
