"""Tests for maze models, carving and solving."""

import random

import pytest

from wgkit.config import MazeConfig
from wgkit.errors import NoPathExistsError
from wgkit.maze import KruskalMazeCarver, Maze, Room, Wall, generate_maze, render, solve


@pytest.mark.unit
def test_grid_wall_count() -> None:
    """Test a grid has every interior wall standing."""
    maze = Maze.grid(4, 3)

    assert len(maze.rooms) == 12
    assert len(maze.walls) == 3 * 3 + 4 * 2
    assert maze.openings == frozenset()
    assert maze.has_wall(Room(0, 1), Room(0, 0))
    assert not maze.has_wall(Room(0, 0), Room(1, 1))


@pytest.mark.unit
def test_wall_equality_ignores_distance() -> None:
    """Test reweighted walls still match the original."""
    wall = Wall(Room(0, 0), Room(0, 1))
    heavier = Wall(Room(0, 0), Room(0, 1), distance=7.5)

    assert wall == heavier
    assert hash(wall) == hash(heavier)
    assert wall < heavier
    assert heavier.other_vertex(Room(0, 1)) == Room(0, 0)
    with pytest.raises(ValueError):
        wall.other_vertex(Room(3, 3))


@pytest.mark.unit
def test_carve_opens_spanning_tree() -> None:
    """Test carving removes exactly rooms - 1 walls and connects every room."""
    maze = Maze.grid(5, 4)
    carved = KruskalMazeCarver(rng=random.Random(11)).carve(maze)

    assert len(carved.openings) == len(maze.rooms) - 1
    assert carved.walls | carved.openings == maze.walls
    for room in carved.rooms:
        route = solve(carved, Room(0, 0), room)
        assert all(opening in carved.openings for opening in route)


@pytest.mark.unit
def test_carver_leaves_input_unchanged() -> None:
    """Test the input maze and its walls keep their original state."""
    maze = Maze.grid(3, 3)
    walls_before = {(wall, wall.distance) for wall in maze.walls}

    removed = KruskalMazeCarver(rng=random.Random(5)).walls_to_remove(maze)

    assert {(wall, wall.distance) for wall in maze.walls} == walls_before
    assert all(wall.distance == 1.0 for wall in removed)
    assert removed <= maze.walls


@pytest.mark.unit
def test_generate_maze_is_reproducible_with_seed() -> None:
    """Test the same seed carves the same maze."""
    config = MazeConfig(width=6, height=6, seed=3)

    assert generate_maze(config) == generate_maze(config)


@pytest.mark.unit
def test_solve_uncarved_maze_has_no_path() -> None:
    """Test rooms separated by walls are unreachable."""
    with pytest.raises(NoPathExistsError):
        solve(Maze.grid(2, 2), Room(0, 0), Room(1, 1))


@pytest.mark.unit
def test_without_rejects_unknown_wall() -> None:
    """Test only standing walls can be removed."""
    maze = Maze.grid(2, 1)

    with pytest.raises(ValueError, match="not standing"):
        maze.without({Wall(Room(0, 0), Room(1, 0))})


@pytest.mark.unit
@pytest.mark.parametrize(
    ("kwargs", "message"),
    [
        ({"width": 0}, "width"),
        ({"height": -2}, "height"),
        ({"max_weight": 0.0}, "max_weight"),
    ],
)
def test_maze_config_validation(kwargs: dict, message: str) -> None:
    """Test invalid maze configuration is rejected."""
    with pytest.raises(ValueError, match=message):
        MazeConfig(**kwargs)


@pytest.mark.unit
def test_render_grid_and_carved() -> None:
    """Test ASCII drawing of a two-room maze before and after carving."""
    maze = Maze.grid(2, 1)
    carved = maze.without(set(maze.walls))

    assert render(maze) == "+---+---+\n|   |   |\n+---+---+"
    assert render(carved) == "+---+---+\n|       |\n+---+---+"


@pytest.mark.unit
def test_render_marks_route() -> None:
    """Test rooms on a route are marked."""
    maze = Maze.grid(2, 1)
    carved = maze.without(set(maze.walls))
    route = solve(carved, Room(0, 0), Room(0, 1))

    assert render(carved, route).splitlines()[1] == "| *   * |"
