"""Pytest configuration and fixtures for test suite."""

import json
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from wgkit.graph import WeightedEdge, WeightedGraph  # noqa: E402

AB = WeightedEdge("A", "B", 1.0)
BC = WeightedEdge("B", "C", 2.0)
AC = WeightedEdge("A", "C", 5.0)


@pytest.fixture
def triangle() -> WeightedGraph[str, WeightedEdge[str]]:
    """Graph A-B (1), B-C (2), A-C (5)."""
    return WeightedGraph(["A", "B", "C"], [AB, BC, AC])


@pytest.fixture
def write_graph(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a graph document to a JSON file."""

    def _factory(
        vertices: list[Any],
        edges: list[tuple[Any, Any, float]],
        name: str = "graph.json",
    ) -> Path:
        path = tmp_path / name
        document = {
            "vertices": vertices,
            "edges": [{"u": u, "v": v, "weight": w} for u, v, w in edges],
        }
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _factory
