from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib.resources import files as resource_files
from pathlib import Path
from typing import Any, List, Optional, Tuple

import yaml

from ..errors import GridError, ScenarioError
from ..grid import Grid

logger = logging.getLogger(__name__)

_PKG = "beast_escape.scenarios"
_DEFAULT_CORPUS = "regression.yaml"


@dataclass(frozen=True)
class Scenario:
    """One corpus entry: a layout plus the expected route size for each sample beast.

    Sizes count route cells including the hero's start; 0 means no escape.
    """

    name: str
    grid: Grid
    trap_beast: int
    wary_beast: int

    def expected_size(self, can_step_on_trap: bool) -> int:
        return self.trap_beast if can_step_on_trap else self.wary_beast

    def expected_moves(self, can_step_on_trap: bool) -> Optional[int]:
        """Number of hero moves expected, or None when the hero must be stuck."""
        size = self.expected_size(can_step_on_trap)
        return size - 1 if size > 0 else None


def load_scenarios(path: Optional[Path] = None) -> List[Scenario]:
    """Load the regression corpus from YAML.

    If path is None, loads the bundled resource at
    beast_escape/scenarios/regression.yaml.
    """
    if path is None:
        data = resource_files(_PKG).joinpath(_DEFAULT_CORPUS).read_text(encoding="utf-8")
        logger.debug("Loaded bundled scenario corpus")
    else:
        with open(path, "r", encoding="utf-8") as f:
            data = f.read()
        logger.debug("Loaded scenario corpus from path: %s", path)

    raw = yaml.safe_load(data) or {}
    entries = raw.get("scenarios") if isinstance(raw, dict) else None
    if not isinstance(entries, list):
        raise ScenarioError("corpus must be a mapping with a 'scenarios' list")

    scenarios = [_parse_entry(i, entry) for i, entry in enumerate(entries)]
    logger.info("Scenario corpus: %d scenarios", len(scenarios))
    return scenarios


def _parse_entry(index: int, entry: Any) -> Scenario:
    if not isinstance(entry, dict):
        raise ScenarioError("entry must be a mapping", index)

    name = str(entry.get("name") or f"scenario-{index}")
    layout = entry.get("layout")
    if isinstance(layout, str):
        layout = [layout]
    if not isinstance(layout, list) or not all(isinstance(row, str) for row in layout):
        raise ScenarioError("'layout' must be a string or a list of strings", index)

    try:
        grid = Grid.from_rows(layout)
    except GridError as e:
        raise ScenarioError(f"invalid layout for {name!r}: {e}", index) from e

    trap_beast, wary_beast = _expected_sizes(index, entry)
    return Scenario(name=name, grid=grid, trap_beast=trap_beast, wary_beast=wary_beast)


def _expected_sizes(index: int, entry: dict) -> Tuple[int, int]:
    sizes = []
    for key in ("trap_beast", "wary_beast"):
        value = entry.get(key)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ScenarioError(f"'{key}' must be a non-negative integer, got {value!r}", index)
        sizes.append(value)
    return sizes[0], sizes[1]
