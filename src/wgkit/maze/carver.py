"""Carve and solve grid mazes with Kruskal's algorithm and Dijkstra."""

import random
from dataclasses import replace

from wgkit.config import MazeConfig, TieBreakPolicy
from wgkit.graph.weighted_graph import WeightedGraph
from wgkit.maze.models import Maze, Room, Wall

__all__ = ["KruskalMazeCarver", "generate_maze", "render", "solve"]


class KruskalMazeCarver:
    """Pick walls to knock down so that every room is reachable.

    Each wall gets a random weight and the walls of a minimum spanning tree
    of the room graph are removed, which yields a perfect maze: exactly one
    route between any two rooms.
    """

    def __init__(self, rng: random.Random | None = None, max_weight: float = 10.0) -> None:
        """Initialize carver.

        Parameters
        ----------
        rng : random.Random | None, optional
            Source of wall weights and union tie-breaks.
        max_weight : float, optional
            Upper bound (exclusive) of wall weights, by default 10.0.
        """
        self._rng = rng if rng is not None else random.Random()
        self.max_weight = max_weight

    def walls_to_remove(self, maze: Maze) -> set[Wall]:
        """Return the walls whose removal connects every room.

        The maze is left untouched; weights are assigned on copies.

        Parameters
        ----------
        maze : Maze
            Maze with its walls standing.

        Returns
        -------
        set[Wall]
            Original wall objects, ``len(rooms) - 1`` of them.
        """
        # Sort before weighting so a seeded rng is reproducible.
        ordered = sorted(maze.walls, key=lambda w: (w.room1, w.room2))
        weighted = [replace(wall, distance=self._rng.random() * self.max_weight) for wall in ordered]
        originals = {wall: wall for wall in maze.walls}

        graph = WeightedGraph(maze.rooms, weighted)
        tree = graph.minimum_spanning_tree(policy=TieBreakPolicy.RANDOM, rng=self._rng)
        return {originals[wall] for wall in tree}

    def carve(self, maze: Maze) -> Maze:
        """Return a copy of ``maze`` with a spanning tree of walls removed."""
        return maze.without(self.walls_to_remove(maze))


def generate_maze(config: MazeConfig) -> Maze:
    """Build a grid maze and carve it.

    Parameters
    ----------
    config : MazeConfig
        Maze dimensions, seed and weight bound.

    Returns
    -------
    Maze
        Carved maze.
    """
    carver = KruskalMazeCarver(rng=random.Random(config.seed), max_weight=config.max_weight)
    return carver.carve(Maze.grid(config.width, config.height))


def solve(maze: Maze, start: Room, end: Room) -> list[Wall]:
    """Return the openings crossed on the shortest route between two rooms.

    Raises
    ------
    UnknownElementError
        If a room lies outside the maze.
    NoPathExistsError
        If the rooms are not connected through openings.
    """
    graph = WeightedGraph(maze.rooms, maze.openings)
    return graph.shortest_path(start, end)


def render(maze: Maze, path: list[Wall] | None = None) -> str:
    """Draw a maze as ASCII art.

    Parameters
    ----------
    maze : Maze
        Maze to draw.
    path : list[Wall] | None, optional
        Openings of a route; the rooms on it are marked with ``*``.

    Returns
    -------
    str
        Multi-line drawing without a trailing newline.
    """
    marked: set[Room] = set()
    for wall in path or ():
        marked.update((wall.room1, wall.room2))

    lines = ["+" + "---+" * maze.width]
    for row in range(maze.height):
        cells = "|"
        floor = "+"
        for col in range(maze.width):
            room = Room(row, col)
            cells += " * " if room in marked else "   "
            east = col + 1 == maze.width or maze.has_wall(room, Room(row, col + 1))
            cells += "|" if east else " "
            south = row + 1 == maze.height or maze.has_wall(room, Room(row + 1, col))
            floor += ("---" if south else "   ") + "+"
        lines.append(cells)
        lines.append(floor)
    return "\n".join(lines)
