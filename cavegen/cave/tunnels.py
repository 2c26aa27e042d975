"""Corridor carving: integer line tracing plus a disc brush along the line."""
from __future__ import annotations

from typing import List

from .cells import Coord2D, Grid, check_range
from .tiles import OPEN


def _sign(v: int) -> int:
    return (v > 0) - (v < 0)


def get_line(start: Coord2D, end: Coord2D) -> List[Coord2D]:
    """Rasterise the segment from ``start`` toward ``end``.

    Steps along the longer axis and accumulates error on the shorter one,
    starting the accumulator at half the long delta. Returns ``longest``
    points beginning with ``start``; ``end`` itself is not included, and
    ``start == end`` yields an empty list.
    """
    x, y = start
    dx = end[0] - x
    dy = end[1] - y
    step = _sign(dx)
    gradient_step = _sign(dy)
    longest = abs(dx)
    shortest = abs(dy)
    inverted = False
    if longest < shortest:
        inverted = True
        longest, shortest = shortest, longest
        step, gradient_step = gradient_step, step

    line: List[Coord2D] = []
    accumulation = longest // 2
    for _ in range(longest):
        line.append((x, y))
        if inverted:
            y += step
        else:
            x += step
        accumulation += shortest
        if accumulation >= longest:
            if inverted:
                x += gradient_step
            else:
                y += gradient_step
            accumulation -= longest
    return line


def stamp_circle(grid: Grid, center: Coord2D, radius: int) -> int:
    """Open every in-range cell within ``radius`` of ``center``; return cells opened."""
    size = len(grid)
    cx, cy = center
    r2 = radius * radius
    opened = 0
    for dx in range(-radius, radius + 1):
        for dy in range(-radius, radius + 1):
            if dx * dx + dy * dy > r2:
                continue
            x, y = cx + dx, cy + dy
            if 0 <= x < size and 0 <= y < size and grid[x][y] != OPEN:
                grid[x][y] = OPEN
                opened += 1
    return opened


def carve_passage(grid: Grid, start: Coord2D, end: Coord2D, radius: int) -> int:
    """Carve a rounded tunnel of ``radius`` from ``start`` to ``end``.

    Both endpoints must lie inside the grid. Returns the number of cells
    that changed from WALL to OPEN.
    """
    size = len(grid)
    check_range(size, *start)
    check_range(size, *end)
    opened = 0
    for point in get_line(start, end):
        opened += stamp_circle(grid, point, radius)
    return opened


__all__ = ["get_line", "stamp_circle", "carve_passage"]
