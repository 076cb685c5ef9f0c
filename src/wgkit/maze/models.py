"""Grid maze data models."""

from dataclasses import dataclass, field
from typing import Any

__all__ = ["Maze", "Room", "Wall"]

DEFAULT_WALL_DISTANCE = 1.0


@dataclass(frozen=True, order=True)
class Room:
    """A cell of a grid maze.

    Attributes
    ----------
    row : int
        Zero-based row, top to bottom.
    col : int
        Zero-based column, left to right.
    """

    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


@dataclass(frozen=True)
class Wall:
    """Wall between two adjacent rooms, usable as a graph edge.

    Walls compare equal when they separate the same two rooms; ``distance``
    takes part only in ordering, so a reweighted copy of a wall still
    matches the original.

    Attributes
    ----------
    room1 : Room
        Smaller of the two rooms.
    room2 : Room
        Larger of the two rooms.
    distance : float
        Edge weight when the maze is viewed as a graph.
    """

    room1: Room
    room2: Room
    distance: float = field(default=DEFAULT_WALL_DISTANCE, compare=False)

    @property
    def vertex1(self) -> Room:
        return self.room1

    @property
    def vertex2(self) -> Room:
        return self.room2

    @property
    def weight(self) -> float:
        return self.distance

    def other_vertex(self, room: Room) -> Room:
        """Return the room on the other side of this wall.

        Raises
        ------
        ValueError
            If ``room`` is not next to this wall.
        """
        if room == self.room1:
            return self.room2
        if room == self.room2:
            return self.room1
        raise ValueError(f"{room} is not next to wall {self.room1}|{self.room2}")

    def __lt__(self, other: "Wall") -> bool:
        if not isinstance(other, Wall):
            return NotImplemented
        return self.distance < other.distance

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary.

        Returns
        -------
        dict[str, Any]
            Dictionary representation.
        """
        return {
            "room1": [self.room1.row, self.room1.col],
            "room2": [self.room2.row, self.room2.col],
            "distance": self.distance,
        }


@dataclass(frozen=True)
class Maze:
    """Rectangular maze of rooms separated by walls.

    Attributes
    ----------
    width : int
        Number of columns.
    height : int
        Number of rows.
    walls : frozenset[Wall]
        Walls still standing.
    openings : frozenset[Wall]
        Walls that were removed.
    """

    width: int
    height: int
    walls: frozenset[Wall]
    openings: frozenset[Wall] = frozenset()

    @staticmethod
    def grid(width: int, height: int) -> "Maze":
        """Create a maze with every interior wall standing.

        Parameters
        ----------
        width : int
            Number of columns.
        height : int
            Number of rows.

        Returns
        -------
        Maze
            Maze with ``height * (width - 1) + width * (height - 1)`` walls.
        """
        if width < 1 or height < 1:
            raise ValueError(f"Maze dimensions must be positive, got {width}x{height}")

        walls: set[Wall] = set()
        for row in range(height):
            for col in range(width):
                room = Room(row, col)
                if col + 1 < width:
                    walls.add(Wall(room, Room(row, col + 1)))
                if row + 1 < height:
                    walls.add(Wall(room, Room(row + 1, col)))
        return Maze(width=width, height=height, walls=frozenset(walls))

    @property
    def rooms(self) -> list[Room]:
        """All rooms in row-major order."""
        return [Room(row, col) for row in range(self.height) for col in range(self.width)]

    def has_wall(self, room_a: Room, room_b: Room) -> bool:
        """Check whether a wall stands between two rooms."""
        first, second = sorted((room_a, room_b))
        return Wall(first, second) in self.walls

    def without(self, removed: frozenset[Wall] | set[Wall]) -> "Maze":
        """Return a copy with ``removed`` walls turned into openings.

        Raises
        ------
        ValueError
            If a wall is not standing in this maze.
        """
        missing = set(removed) - self.walls
        if missing:
            raise ValueError(f"{len(missing)} wall(s) are not standing in this maze")
        return Maze(
            width=self.width,
            height=self.height,
            walls=self.walls - frozenset(removed),
            openings=self.openings | frozenset(removed),
        )
