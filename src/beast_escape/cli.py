from __future__ import annotations

import argparse
import logging
from pathlib import Path

from . import __version__
from .beasts import SampleBeast
from .errors import GridError, ScenarioError
from .grid import Grid
from .logging_config import configure_logging
from .pathfinding import find_escape_route
from .runner import run_scenarios
from .scenarios import load_scenarios
from .settings import Settings

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_TRAPPED = 2


def _cmd_run(args: argparse.Namespace, settings: Settings) -> int:
    corpus = args.corpus or settings.runner.corpus
    workers = args.workers or settings.runner.workers
    validate = settings.runner.validate_routes and args.validate

    try:
        scenarios = load_scenarios(corpus)
    except ScenarioError as e:
        logger.error("Cannot load scenario corpus: %s", e)
        return EXIT_INVALID

    report = run_scenarios(scenarios, workers=workers, validate_routes=validate)
    for failure in report.failures:
        print(f"FAIL: {failure.describe()}")
    print(report.summary())
    # The corpus run reports, it does not gate.
    return EXIT_OK


def _cmd_solve(args: argparse.Namespace, settings: Settings) -> int:
    try:
        grid = Grid.from_file(args.layout)
    except GridError as e:
        logger.error("Invalid layout %s: %s", args.layout, e)
        return EXIT_INVALID

    beast = SampleBeast(can_step_on_trap=not args.beast_avoids_traps)
    route = find_escape_route(grid, beast)
    if not route and grid.hero != grid.exit:
        print("No escape route")
        return EXIT_TRAPPED

    print(f"Escape in {len(route)} moves")
    print(grid.render(route))
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="beast-escape",
        description="Shortest escape routes for a hero pursued by a beast on a grid",
    )
    p.add_argument(
        "--settings",
        dest="settings_path",
        type=Path,
        default=None,
        help="Path to a user settings YAML file to load/override defaults.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--debug", action="store_true", help="Enable verbose debug logging.")
    sub = p.add_subparsers(dest="cmd", required=True)

    r = sub.add_parser("run", help="Run the regression corpus against both sample beasts")
    r.add_argument("--corpus", type=Path, default=None, help="Scenario YAML file (defaults to the bundled corpus)")
    r.add_argument("--workers", type=int, default=None, help="Number of searches to run in parallel")
    r.add_argument("--no-validate", dest="validate", action="store_false", help="Only compare route lengths")
    r.set_defaults(func=_cmd_run, validate=True)

    s = sub.add_parser("solve", help="Find the escape route for a layout file")
    s.add_argument("layout", type=Path, help="Path to a layout text file")
    s.add_argument(
        "--beast-avoids-traps",
        action="store_true",
        help="Use a beast that may not step on traps (default: it may)",
    )
    s.set_defaults(func=_cmd_solve)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    # Configure early so settings loading is logged; --debug wins, else env/INFO
    configure_logging(level=logging.DEBUG if args.debug else None)
    settings = Settings.load(user_path=args.settings_path)
    if not args.debug:
        logging.getLogger().setLevel(getattr(logging, settings.logging.level, logging.INFO))
    return args.func(args, settings)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
