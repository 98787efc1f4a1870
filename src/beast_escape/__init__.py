from importlib.metadata import version, PackageNotFoundError

from .beasts import BeastPolicy, FunctionBeast, SampleBeast, as_beast_policy
from .errors import DuplicateMarker, EmptyGrid, GridError, MissingMarker, NonRectangular, ScenarioError, UnknownSymbol
from .grid import Direction, Grid, Position, Tile
from .pathfinding import find_escape_route
from .validation import is_valid_route, route_violations

__all__ = [
    "__version__",
    "BeastPolicy",
    "Direction",
    "DuplicateMarker",
    "EmptyGrid",
    "FunctionBeast",
    "Grid",
    "GridError",
    "MissingMarker",
    "NonRectangular",
    "Position",
    "SampleBeast",
    "ScenarioError",
    "Tile",
    "UnknownSymbol",
    "as_beast_policy",
    "find_escape_route",
    "is_valid_route",
    "route_violations",
]

try:
    __version__ = version("beast-escape")
except PackageNotFoundError:  # pragma: no cover - during tests without packaging
    __version__ = "0.0.0"
