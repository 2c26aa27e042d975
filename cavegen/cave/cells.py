from typing import List, Tuple

from .errors import OutOfBoundsError
from .tiles import WALL

Grid = List[List[int]]
Coord2D = Tuple[int, int]


def new_grid(size: int, fill: int = WALL) -> Grid:
    """Allocate a square grid indexed ``grid[x][y]``."""
    return [[fill for _ in range(size)] for _ in range(size)]


def in_range(size: int, x: int, y: int) -> bool:
    return 0 <= x < size and 0 <= y < size


def check_range(size: int, x: int, y: int) -> None:
    if not in_range(size, x, y):
        raise OutOfBoundsError(x, y, size)


__all__ = ["Grid", "Coord2D", "new_grid", "in_range", "check_range"]
