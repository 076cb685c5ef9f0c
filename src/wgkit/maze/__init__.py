"""Grid mazes carved with Kruskal's algorithm."""

from wgkit.maze.carver import KruskalMazeCarver, generate_maze, render, solve
from wgkit.maze.models import Maze, Room, Wall

__all__ = [
    "KruskalMazeCarver",
    "Maze",
    "Room",
    "Wall",
    "generate_maze",
    "render",
    "solve",
]
