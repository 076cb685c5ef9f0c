"""Configuration dataclasses and policies."""

from dataclasses import dataclass
from enum import StrEnum


class TieBreakPolicy(StrEnum):
    """How a disjoint set picks the new root when two ranks are equal.

    Attributes
    ----------
    RANDOM : str
        Pick a side with the set's pseudo-random source.
    FIRST : str
        The root of the first union argument wins.
    SECOND : str
        The root of the second union argument wins.
    """

    RANDOM = "random"
    FIRST = "first"
    SECOND = "second"


@dataclass(frozen=True)
class MazeConfig:
    """Configuration for maze generation.

    Attributes
    ----------
    width : int
        Number of room columns, by default 10.
    height : int
        Number of room rows, by default 10.
    seed : int | None
        Seed for wall weights. If None, output is not reproducible.
    max_weight : float
        Upper bound (exclusive) of random wall weights, by default 10.0.
    """

    width: int = 10
    height: int = 10
    seed: int | None = None
    max_weight: float = 10.0

    def __post_init__(self) -> None:
        """Validate dimensions and weight bound."""
        if self.width < 1:
            raise ValueError(f"width must be >= 1, got {self.width}")

        if self.height < 1:
            raise ValueError(f"height must be >= 1, got {self.height}")

        if self.max_weight <= 0.0:
            raise ValueError(f"max_weight must be > 0, got {self.max_weight}")
