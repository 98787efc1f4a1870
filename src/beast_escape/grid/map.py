from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..errors import DuplicateMarker, EmptyGrid, MissingMarker, NonRectangular, UnknownSymbol
from .tiles import Position, Tile

logger = logging.getLogger(__name__)

HERO = "H"
BEAST = "B"
EXIT = "E"
ROUTE = "."

_TILE_SYMBOLS: Dict[str, Tile] = {
    " ": Tile.EMPTY,
    "W": Tile.WALL,
    "T": Tile.TRAP,
}
_SYMBOL_FOR_TILE: Dict[Tile, str] = {tile: sym for sym, tile in _TILE_SYMBOLS.items()}


class Grid:
    """
    Immutable rectangular tile grid with fixed hero, beast and exit positions.

    Every lookup goes through ``classify``, which treats anything outside the
    grid (including negative coordinates) as a wall. Marker cells are EMPTY.
    """

    def __init__(
        self,
        tiles: Sequence[Sequence[Tile]],
        hero: Position,
        beast: Position,
        exit: Position,
    ) -> None:
        rows = tuple(tuple(row) for row in tiles)
        if not rows:
            raise EmptyGrid()
        for index, row in enumerate(rows):
            if len(row) != len(rows[0]):
                raise NonRectangular(index, len(rows[0]), len(row))
        self._tiles: Tuple[Tuple[Tile, ...], ...] = rows
        self._hero = hero
        self._beast = beast
        self._exit = exit
        logger.debug("Grid created: %dx%d hero=%s beast=%s exit=%s", self.height, self.width, hero, beast, exit)

    # ---- Construction ----------------------------------------------------
    @classmethod
    def from_text(cls, text: str) -> "Grid":
        """Parse a layout: ' ' empty, 'W' wall, 'T' trap, 'H'/'B'/'E' markers, newline between rows."""
        tiles: List[List[Tile]] = [[]]
        markers: Dict[str, Optional[Position]] = {HERO: None, BEAST: None, EXIT: None}

        for ch in text:
            if ch == "\n":
                tiles.append([])
                continue
            here = Position(len(tiles) - 1, len(tiles[-1]))
            if ch in markers:
                if markers[ch] is not None:
                    raise DuplicateMarker(ch, here)
                markers[ch] = here
                tiles[-1].append(Tile.EMPTY)
            elif ch in _TILE_SYMBOLS:
                tiles[-1].append(_TILE_SYMBOLS[ch])
            else:
                raise UnknownSymbol(ch, here)

        for marker in (HERO, BEAST, EXIT):
            if markers[marker] is None:
                raise MissingMarker(marker)

        width = len(tiles[0])
        for index, row in enumerate(tiles):
            if len(row) != width:
                raise NonRectangular(index, width, len(row))

        return cls(tiles, markers[HERO], markers[BEAST], markers[EXIT])  # type: ignore[arg-type]

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Grid":
        return cls.from_text("\n".join(rows))

    @classmethod
    def from_file(cls, path: Path) -> "Grid":
        """Read a layout file; LF and CRLF line endings are both accepted."""
        rows = Path(path).read_text(encoding="utf-8").splitlines()
        logger.debug("Loaded layout from %s", path)
        return cls.from_rows(rows)

    # ---- Query -----------------------------------------------------------
    @property
    def hero(self) -> Position:
        return self._hero

    @property
    def beast(self) -> Position:
        return self._beast

    @property
    def exit(self) -> Position:
        return self._exit

    @property
    def tiles(self) -> Tuple[Tuple[Tile, ...], ...]:
        return self._tiles

    @property
    def height(self) -> int:
        return len(self._tiles)

    @property
    def width(self) -> int:
        return len(self._tiles[0])

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.row < self.height and 0 <= pos.col < len(self._tiles[pos.row])

    def classify(self, pos: Position) -> Tile:
        """Tile at ``pos``; WALL if the position lies outside the grid."""
        if not self.in_bounds(pos):
            return Tile.WALL
        return self._tiles[pos.row][pos.col]

    # ---- Export ----------------------------------------------------------
    def to_text(self) -> str:
        return "\n".join(self.render_lines())

    def render(self, route: Sequence[Position] = ()) -> str:
        """Layout text with route cells drawn as '.'; markers take precedence."""
        return "\n".join(self.render_lines(route))

    def render_lines(self, route: Sequence[Position] = ()) -> List[str]:
        overlay = {pos: ROUTE for pos in route}
        overlay[self._beast] = BEAST
        overlay[self._exit] = EXIT
        overlay[self._hero] = HERO
        lines: List[str] = []
        for r, row in enumerate(self._tiles):
            lines.append("".join(overlay.get(Position(r, c), _SYMBOL_FOR_TILE[t]) for c, t in enumerate(row)))
        return lines

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self._tiles, self._hero, self._beast, self._exit) == (
            other._tiles,
            other._hero,
            other._beast,
            other._exit,
        )

    def __hash__(self) -> int:
        return hash((self._tiles, self._hero, self._beast, self._exit))

    def __repr__(self) -> str:
        return f"Grid({self.height}x{self.width}, hero={self._hero}, beast={self._beast}, exit={self._exit})"
