from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Tuple


class Tile(IntEnum):
    WALL = 0
    EMPTY = 1
    TRAP = 2


class Direction(Enum):
    """Cardinal moves in the canonical expansion order (up, down, left, right)."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value


@dataclass(frozen=True, order=True)
class Position:
    """A cell coordinate as (row, col) with (0,0) at top-left.

    Ordering is lexicographic by row, then column. Stepping off the top or left
    edge yields a negative component; such a position is never a real cell and
    the grid classifies it as a wall.
    """

    row: int
    col: int

    def moved(self, direction: Direction) -> "Position":
        d_row, d_col = direction.delta
        return Position(self.row + d_row, self.col + d_col)

    def neighbors4(self):
        # Ordered for deterministic traversal
        for direction in Direction:
            yield self.moved(direction)

    def is_adjacent(self, other: "Position") -> bool:
        return abs(self.row - other.row) + abs(self.col - other.col) == 1

    def __str__(self) -> str:
        return f"({self.row},{self.col})"
