"""Structural postcondition checks for a generated cave.

Used by ``scripts/diagnose_seeds.py`` and the test-suite to confirm a cave
is fully connected and sealed on the sides that have no neighbour.
"""
from __future__ import annotations

from collections import deque
from typing import Any, Dict, Set

from .cells import Coord2D, Grid
from .tiles import OPEN, SIDES


def open_reachable(grid: Grid, start: Coord2D) -> Set[Coord2D]:
    """OPEN cells 4-connected to ``start`` (empty when start is not OPEN)."""
    size = len(grid)
    sx, sy = start
    if grid[sx][sy] != OPEN:
        return set()
    seen = {start}
    q = deque([start])
    while q:
        x, y = q.popleft()
        for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if 0 <= nx < size and 0 <= ny < size and (nx, ny) not in seen and grid[nx][ny] == OPEN:
                seen.add((nx, ny))
                q.append((nx, ny))
    return seen


def analyze(cave) -> Dict[str, Any]:
    grid = cave.grid
    main = cave.main_room
    start = next(((x, y) for x, y in main.tiles if grid[x][y] == OPEN), None)
    reach = open_reachable(grid, start) if start is not None else set()
    isolated = [
        r.room_id for r in cave.rooms if not any((x, y) in reach for x, y in r.tiles)
    ]
    open_edges = {}
    for side in SIDES:
        if cave.area.is_child_edge(side):
            continue
        opened = sum(1 for v in cave.edge_pattern(side).pattern if v == OPEN)
        if opened:
            open_edges[side] = opened
    return {
        "rooms": len(cave.rooms),
        "unreachable_rooms": [r.room_id for r in cave.rooms if not r.reaches_main],
        "isolated_rooms": isolated,
        "open_closed_edges": open_edges,
    }


__all__ = ["analyze", "open_reachable"]
