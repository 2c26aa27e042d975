"""Flood-fill segmentation of the grid into same-type 4-connected regions."""
from __future__ import annotations

from collections import deque
from typing import List, Optional

from .cells import Coord2D, Grid, check_range

Region = List[Coord2D]


def flood_region(grid: Grid, x: int, y: int, visited: Optional[List[List[bool]]] = None) -> Region:
    """Return every cell 4-connected to (x,y) sharing its type, in BFS order.

    ``visited`` is updated in place when given, which lets a full-grid scan
    share one mark table across floods.
    """
    size = len(grid)
    check_range(size, x, y)
    if visited is None:
        visited = [[False] * size for _ in range(size)]
    tile_type = grid[x][y]
    region: Region = []
    q = deque([(x, y)])
    visited[x][y] = True
    while q:
        cx, cy = q.popleft()
        region.append((cx, cy))
        for nx, ny in ((cx - 1, cy), (cx, cy - 1), (cx, cy + 1), (cx + 1, cy)):
            if 0 <= nx < size and 0 <= ny < size and not visited[nx][ny] and grid[nx][ny] == tile_type:
                visited[nx][ny] = True
                q.append((nx, ny))
    return region


def get_all_regions(grid: Grid, tile_type: int) -> List[Region]:
    """Every region of ``tile_type``, discovered scanning x outer, y inner."""
    size = len(grid)
    visited = [[False] * size for _ in range(size)]
    regions: List[Region] = []
    for x in range(size):
        for y in range(size):
            if not visited[x][y] and grid[x][y] == tile_type:
                regions.append(flood_region(grid, x, y, visited))
    return regions


__all__ = ["Region", "flood_region", "get_all_regions"]
