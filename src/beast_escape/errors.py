from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .grid.tiles import Position


class GridError(ValueError):
    """Base error for grid layouts rejected at construction."""


class DuplicateMarker(GridError):
    """Raised when a hero, beast or exit marker appears more than once."""

    def __init__(self, marker: str, position: Position) -> None:
        super().__init__(f"Multiple {MARKER_NAMES.get(marker, marker)} markers (second at {position})")
        self.marker = marker
        self.position = position


class MissingMarker(GridError):
    """Raised when a layout has no hero, beast or exit."""

    def __init__(self, marker: str) -> None:
        super().__init__(f"No {MARKER_NAMES.get(marker, marker)} marker in layout")
        self.marker = marker


class UnknownSymbol(GridError):
    """Raised for a character outside the layout alphabet."""

    def __init__(self, symbol: str, position: Position) -> None:
        super().__init__(f"Unknown tile symbol {symbol!r} at {position}")
        self.symbol = symbol
        self.position = position


class EmptyGrid(GridError):
    """Raised when a grid is built from no rows at all."""

    def __init__(self) -> None:
        super().__init__("Grid must have at least one row")


class NonRectangular(GridError):
    """Raised when a row's length differs from the first row's."""

    def __init__(self, row: int, expected: int, actual: int) -> None:
        super().__init__(f"Non-rectangular layout: row {row} has {actual} cells, expected {expected}")
        self.row = row
        self.expected = expected
        self.actual = actual


class ScenarioError(ValueError):
    """Raised when a regression corpus entry is malformed."""

    def __init__(self, message: str, index: Optional[int] = None) -> None:
        if index is not None:
            message = f"Scenario #{index}: {message}"
        super().__init__(message)
        self.index = index


MARKER_NAMES = {"H": "hero", "B": "beast", "E": "exit"}
