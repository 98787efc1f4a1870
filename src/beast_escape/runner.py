from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from .beasts import SampleBeast
from .grid import Position
from .pathfinding import find_escape_route
from .scenarios import Scenario
from .validation import route_violations

logger = logging.getLogger(__name__)


@dataclass
class CaseResult:
    """Outcome of one scenario against one beast variant."""

    scenario: str
    can_step_on_trap: bool
    expected_size: int
    route: List[Position]
    violations: List[str] = field(default_factory=list)

    @property
    def size(self) -> int:
        # Same convention as the corpus: start cell included, 0 for no route.
        return len(self.route) + 1 if self.route else 0

    @property
    def passed(self) -> bool:
        return self.size == self.expected_size and not self.violations

    def describe(self) -> str:
        beast = "trap-stepping" if self.can_step_on_trap else "trap-avoiding"
        text = f"{self.scenario} [{beast} beast]: expected size {self.expected_size}, got {self.size}"
        if self.violations:
            text += "; " + "; ".join(self.violations)
        return text


@dataclass
class RunReport:
    results: List[CaseResult] = field(default_factory=list)

    @property
    def ok(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed(self) -> int:
        return len(self.results) - self.ok

    @property
    def failures(self) -> List[CaseResult]:
        return [r for r in self.results if not r.passed]

    def summary(self) -> str:
        if self.failed == 0:
            return f"Passed all {self.ok} tests!"
        return f"{self.failed} of {len(self.results)} tests failed"


def run_case(scenario: Scenario, can_step_on_trap: bool, validate_routes: bool = True) -> CaseResult:
    beast = SampleBeast(can_step_on_trap)
    route = find_escape_route(scenario.grid, beast)
    violations = route_violations(scenario.grid, beast, route) if validate_routes else []
    result = CaseResult(
        scenario=scenario.name,
        can_step_on_trap=can_step_on_trap,
        expected_size=scenario.expected_size(can_step_on_trap),
        route=route,
        violations=violations,
    )
    logger.debug("%s -> %s", result.describe(), "ok" if result.passed else "FAIL")
    return result


def run_scenarios(
    scenarios: Sequence[Scenario],
    workers: int = 1,
    validate_routes: bool = True,
) -> RunReport:
    """Run every scenario against both sample beasts (trap-stepping first).

    Searches share no state, so with ``workers > 1`` they are spread over a
    thread pool; results keep corpus order either way.
    """
    cases: List[Tuple[Scenario, bool]] = [(s, flag) for s in scenarios for flag in (True, False)]
    if workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(lambda c: run_case(c[0], c[1], validate_routes), cases))
    else:
        results = [run_case(s, flag, validate_routes) for s, flag in cases]

    report = RunReport(results=results)
    logger.info("Ran %d checks over %d scenarios: %d ok, %d failed", len(results), len(scenarios), report.ok, report.failed)
    return report
