"""Command-line interface for wgkit.

Provides commands for spanning trees, shortest paths, top-k selection and
maze generation.
"""

import importlib.metadata
import json
import sys
import time
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import click

from wgkit.audit import AuditLogger, generate_run_id
from wgkit.errors import WgkitError

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("wgkit")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"  # Fallback for development

_LOG_OPTION = click.option(
    "--log",
    "log_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Append JSONL audit events to this file",
)


@click.group()
@click.version_option(version=__version__, prog_name="wgkit")
def cli() -> None:
    """Graph algorithms on small weighted graphs.

    Use 'wgkit COMMAND --help' for command-specific help.
    """


@contextmanager
def _audited(command: str, log_path: str | None, parameters: dict[str, Any]) -> Iterator[AuditLogger | None]:
    """Run a command body, logging to ``log_path`` and exiting 1 on errors."""
    audit = AuditLogger(generate_run_id(), Path(log_path), command=command) if log_path else None
    started = time.perf_counter()
    if audit:
        audit.run_started(parameters)

    status = "failed"
    try:
        yield audit
        status = "success"
    except (WgkitError, FileNotFoundError) as e:
        if audit:
            audit.error(type(e).__name__, str(e))
        click.secho(f"✗ Error: {e}", fg="red", err=True)
        sys.exit(1)
    finally:
        if audit:
            audit.run_finished(status, time.perf_counter() - started)
            audit.close()


def _resolve_vertex(graph: Any, raw: str) -> str | int:
    """Map a command-line token to a graph vertex, trying int ids second."""
    if raw in graph:
        return raw
    try:
        number = int(raw)
    except ValueError:
        return raw
    return number if number in graph else raw


@cli.command()
@click.argument("graph_path", type=click.Path(exists=True, dir_okay=False))
@_LOG_OPTION
def mst(graph_path: str, log_path: str | None) -> None:
    """Print a minimum spanning tree of the graph in GRAPH_PATH.

    The graph must be connected; otherwise a spanning forest is printed.

    Examples
    --------
        wgkit mst graph.json
        wgkit mst graph.json --log events.jsonl
    """
    from wgkit.graph import edges_to_dicts, load_graph

    with _audited("mst", log_path, {"graph": graph_path}) as audit:
        graph = load_graph(graph_path)
        if audit:
            audit.graph_loaded(graph_path, graph.num_vertices(), graph.num_edges())

        tree = sorted(graph.minimum_spanning_tree(), key=lambda e: (e.weight, str(e.vertex1), str(e.vertex2)))
        total = graph.path_weight(tree)
        if audit:
            audit.result({"tree_edges": len(tree), "total_weight": total})

        click.echo(json.dumps({"edges": edges_to_dicts(tree), "total_weight": total}))


@cli.command()
@click.argument("graph_path", type=click.Path(exists=True, dir_okay=False))
@click.argument("start")
@click.argument("end")
@_LOG_OPTION
def path(graph_path: str, start: str, end: str, log_path: str | None) -> None:
    """Print a shortest path from START to END in the graph in GRAPH_PATH.

    Examples
    --------
        wgkit path graph.json A C
    """
    from wgkit.graph import edges_to_dicts, load_graph

    with _audited("path", log_path, {"graph": graph_path, "start": start, "end": end}) as audit:
        graph = load_graph(graph_path)
        if audit:
            audit.graph_loaded(graph_path, graph.num_vertices(), graph.num_edges())

        route = graph.shortest_path(_resolve_vertex(graph, start), _resolve_vertex(graph, end))
        total = graph.path_weight(route)
        if audit:
            audit.result({"path_edges": len(route), "total_weight": total})

        click.echo(json.dumps({"edges": edges_to_dicts(route), "total_weight": total}))


@cli.command()
@click.argument("k", type=int)
@click.argument("values", nargs=-1, type=float)
@_LOG_OPTION
def topk(k: int, values: tuple[float, ...], log_path: str | None) -> None:
    """Print the K largest VALUES in ascending order.

    Examples
    --------
        wgkit topk 3 5 1 9 7 3
    """
    from wgkit.structures import top_k

    with _audited("topk", log_path, {"k": k, "count": len(values)}) as audit:
        selected = top_k(k, values)
        if audit:
            audit.result({"selected": len(selected)})

        click.echo(" ".join(f"{value:g}" for value in selected))


@cli.command()
@click.option("--width", type=int, default=10, show_default=True, help="Number of columns")
@click.option("--height", type=int, default=10, show_default=True, help="Number of rows")
@click.option("--seed", type=int, default=None, help="Seed for reproducible mazes")
@click.option(
    "--solve",
    is_flag=True,
    help="Mark the route from the top-left to the bottom-right room",
)
@_LOG_OPTION
def maze(width: int, height: int, seed: int | None, solve: bool, log_path: str | None) -> None:
    """Generate a maze with Kruskal's algorithm and draw it.

    Examples
    --------
        wgkit maze --width 8 --height 5 --seed 42 --solve
    """
    from wgkit.config import MazeConfig
    from wgkit.maze import Room, generate_maze, render
    from wgkit.maze import solve as solve_maze

    try:
        config = MazeConfig(width=width, height=height, seed=seed)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e

    parameters = {"width": width, "height": height, "seed": seed, "solve": solve}
    with _audited("maze", log_path, parameters) as audit:
        carved = generate_maze(config)
        route = solve_maze(carved, Room(0, 0), Room(height - 1, width - 1)) if solve else None
        if audit:
            audit.result({"openings": len(carved.openings), "walls": len(carved.walls)})

        click.echo(render(carved, route))


if __name__ == "__main__":
    cli()
