from __future__ import annotations

from typing import List, Sequence

from .beasts import as_beast_policy
from .grid import Grid, Position, Tile


def route_violations(grid: Grid, beast: object, route: Sequence[Position]) -> List[str]:
    """Replay ``route`` from the grid's start positions and list every rule it breaks.

    An empty route is accepted as-is: it either means the hero starts on the
    exit or that no route was found, neither of which can be replayed.
    """
    if not route:
        return []

    policy = as_beast_policy(beast)
    problems: List[str] = []
    hero, beast_pos = grid.hero, grid.beast
    for step, target in enumerate(route, start=1):
        if not hero.is_adjacent(target):
            problems.append(f"step {step}: {hero} -> {target} is not a single orthogonal move")
        tile = grid.classify(target)
        if tile in (Tile.WALL, Tile.TRAP):
            problems.append(f"step {step}: hero enters {tile.name} at {target}")
        beast_pos = policy.move(grid, target, beast_pos)
        if beast_pos == target:
            problems.append(f"step {step}: beast catches hero at {target}")
        hero = target

    if hero != grid.exit:
        problems.append(f"route ends at {hero}, not at exit {grid.exit}")
    return problems


def is_valid_route(grid: Grid, beast: object, route: Sequence[Position]) -> bool:
    return not route_violations(grid, beast, route)
