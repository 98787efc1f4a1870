from __future__ import annotations

import logging
from collections import deque
from typing import Dict, List, Optional, Tuple

from .beasts import as_beast_policy
from .grid import Grid, Position, Tile

logger = logging.getLogger(__name__)

State = Tuple[Position, Position]  # (hero, beast)

_BLOCKED_FOR_HERO = (Tile.WALL, Tile.TRAP)


def find_escape_route(grid: Grid, beast: object) -> List[Position]:
    """Breadth-first search over (hero, beast) states for the shortest escape.

    Returns the hero's positions after each move, ending on the exit (the start
    cell is not included). An empty list means no escape route exists, or that
    the hero already stands on the exit; compare ``grid.hero`` with
    ``grid.exit`` to tell them apart.

    ``beast`` is a BeastPolicy or a plain ``fn(grid, hero, beast)``; it is
    asked once per candidate hero move, with the hero's new position and the
    beast's current position. A move is discarded if it enters a wall or trap,
    or if the beast ends on the hero's new cell.
    """
    if grid.hero == grid.exit:
        return []

    policy = as_beast_policy(beast)
    start: State = (grid.hero, grid.beast)
    # Doubles as the visited set: a state is seen iff it is a key.
    came_from: Dict[State, Optional[State]] = {start: None}
    q = deque([start])

    while q:
        state = q.popleft()
        hero, beast_pos = state
        if hero == grid.exit:
            route = _reconstruct(came_from, state)
            logger.debug("Escape found in %d moves after discovering %d states", len(route), len(came_from))
            return route

        for new_hero in hero.neighbors4():
            if grid.classify(new_hero) in _BLOCKED_FOR_HERO:
                continue
            new_beast = policy.move(grid, new_hero, beast_pos)
            if new_beast == new_hero:
                continue  # caught
            nxt = (new_hero, new_beast)
            if nxt not in came_from:
                came_from[nxt] = state
                q.append(nxt)

    logger.debug("No escape route; exhausted %d states", len(came_from))
    return []


def _reconstruct(came_from: Dict[State, Optional[State]], state: State) -> List[Position]:
    route: List[Position] = []
    prev = came_from[state]
    while prev is not None:
        route.append(state[0])
        state = prev
        prev = came_from[state]
    route.reverse()
    return route
