from __future__ import annotations

from typing import Optional

from .boundary import BoundaryStitcher
from .cells import Grid
from .tiles import OPEN, WALL

_NEIGHBORS_8 = ((1, 0), (-1, 0), (0, -1), (0, 1), (1, 1), (-1, -1), (1, -1), (-1, 1))


def count_wall_neighbors(grid: Grid, x: int, y: int) -> int:
    """Count WALL cells among the 8 neighbours of an interior cell."""
    return sum(1 for dx, dy in _NEIGHBORS_8 if grid[x + dx][y + dy] == WALL)


def smooth(grid: Grid, passes: int, stitcher: Optional[BoundaryStitcher] = None) -> None:
    """Run ``passes`` majority-rule passes over the interior, in place.

    Cells are updated as the scan goes (x outer, y inner), so later cells in
    a pass see earlier results. A cell with exactly 4 wall neighbours keeps
    its state. The outer ring is left to the stitcher's edge rules, which run
    before each pass.
    """
    size = len(grid)
    for _ in range(passes):
        if stitcher is not None:
            stitcher.apply(grid)
        for x in range(1, size - 1):
            for y in range(1, size - 1):
                walls = count_wall_neighbors(grid, x, y)
                if walls > 4:
                    grid[x][y] = WALL
                elif walls < 4:
                    grid[x][y] = OPEN


__all__ = ["smooth", "count_wall_neighbors"]
