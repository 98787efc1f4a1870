from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol

from .grid import Direction, Grid, Position, Tile

MoveFn = Callable[[Grid, Position, Position], Position]


class BeastPolicy(Protocol):
    """Protocol that any beast movement rule must follow.

    ``move`` is called once per hero move with the hero's *new* position and
    the beast's *current* position. It must be deterministic and keep no state
    between calls; it may simulate several beast steps internally as long as it
    returns a single resulting position.
    """

    def move(self, grid: Grid, hero: Position, beast: Position) -> Position:
        """Return the beast's position after it reacts to the hero's move."""


@dataclass(frozen=True)
class FunctionBeast:
    """Adapts a plain function ``fn(grid, hero, beast) -> position`` to BeastPolicy."""

    fn: MoveFn

    def move(self, grid: Grid, hero: Position, beast: Position) -> Position:
        return self.fn(grid, hero, beast)


def as_beast_policy(beast: object) -> BeastPolicy:
    """Adapt an object to BeastPolicy if possible.

    Supports two styles:
    - The object itself has a ``move(grid, hero, beast)`` method
    - The object is a callable with that signature

    Raises:
        TypeError: If the object offers neither.
    """
    if callable(getattr(beast, "move", None)):
        return beast  # type: ignore[return-value]
    if callable(beast):
        return FunctionBeast(beast)  # type: ignore[arg-type]
    raise TypeError(f"{type(beast).__name__} is not a beast policy (needs .move or to be callable)")


@dataclass(frozen=True)
class SampleBeast:
    """Beast that takes two greedy steps toward the hero per hero move.

    Each step closes the row gap first and falls back to the column gap when
    the vertical step is blocked. Walls always block; traps block unless
    ``can_step_on_trap`` is set.
    """

    can_step_on_trap: bool = False

    def move(self, grid: Grid, hero: Position, beast: Position) -> Position:
        return self.step(grid, hero, self.step(grid, hero, beast))

    def step(self, grid: Grid, hero: Position, beast: Position) -> Position:
        if beast.row != hero.row:
            target = beast.moved(Direction.UP if beast.row > hero.row else Direction.DOWN)
            if self.can_move_to(grid, target):
                return target

        if beast.col != hero.col:
            target = beast.moved(Direction.LEFT if beast.col > hero.col else Direction.RIGHT)
            if self.can_move_to(grid, target):
                return target

        return beast

    def can_move_to(self, grid: Grid, pos: Position) -> bool:
        tile = grid.classify(pos)
        if tile == Tile.EMPTY:
            return True
        if tile == Tile.TRAP:
            return self.can_step_on_trap
        return False
