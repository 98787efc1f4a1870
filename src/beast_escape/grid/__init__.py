from .tiles import Direction, Position, Tile
from .map import Grid

__all__ = ["Direction", "Position", "Tile", "Grid"]
