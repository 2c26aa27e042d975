"""Initial grid fill: per-cell seeded noise with closed outer edges."""
from __future__ import annotations

from .area import Area
from .cells import Grid, new_grid
from .rng import SeededRandom
from .tiles import BOTTOM, LEFT, OPEN, RIGHT, TOP, WALL


def is_closed_edge_cell(area: Area, size: int, x: int, y: int) -> bool:
    """True when (x,y) sits on an outer edge whose side has no neighbouring area."""
    return (
        (x == 0 and not area.is_child_edge(LEFT))
        or (y == 0 and not area.is_child_edge(BOTTOM))
        or (x == size - 1 and not area.is_child_edge(RIGHT))
        or (y == size - 1 and not area.is_child_edge(TOP))
    )


def random_fill(size: int, area: Area, fill_percent: int, rng: SeededRandom) -> Grid:
    """Return a fresh grid with roughly ``fill_percent`` OPEN cells.

    Closed edge cells are set to WALL without drawing from the stream, so the
    sequence consumed depends on the area's neighbours.
    """
    grid = new_grid(size)
    for x in range(size):
        for y in range(size):
            if is_closed_edge_cell(area, size, x, y):
                grid[x][y] = WALL
            else:
                grid[x][y] = WALL if rng.next(0, 100) > fill_percent else OPEN
    return grid


__all__ = ["random_fill", "is_closed_edge_cell"]
