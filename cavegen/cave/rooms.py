from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

from ..logging_utils import get_logger
from .cells import Coord2D, Grid, in_range
from .errors import NoRoomsError
from .regions import get_all_regions
from .tiles import OPEN, WALL

log = get_logger("cave.rooms")


@dataclass
class Room:
    room_id: int
    tiles: List[Coord2D]
    grid_size: int
    edge_tiles: List[Coord2D] = field(default_factory=list)
    connected: Set[int] = field(default_factory=set)
    reaches_main: bool = False
    is_main: bool = False

    @property
    def size(self) -> int:
        return len(self.tiles)

    def in_range(self, x: int, y: int) -> bool:
        return in_range(self.grid_size, x, y)

    def is_connected(self, other: "Room") -> bool:
        return other.room_id in self.connected


def find_edge_tiles(grid: Grid, tiles: List[Coord2D]) -> List[Coord2D]:
    """Room cells bordering a WALL or the grid edge.

    A cell is listed once per qualifying orthogonal neighbour, so corner
    cells can appear two or three times.
    """
    size = len(grid)
    edges: List[Coord2D] = []
    for tx, ty in tiles:
        for nx, ny in ((tx - 1, ty), (tx, ty - 1), (tx, ty + 1), (tx + 1, ty)):
            if not in_range(size, nx, ny) or grid[nx][ny] == WALL:
                edges.append((tx, ty))
    return edges


def clean_up_regions(
    grid: Grid, min_wall_size: int, min_room_size: int, metrics: Optional[Dict[str, Any]] = None
) -> List[Room]:
    """Drop undersized wall specks and floor pockets, return surviving rooms.

    Rooms come back sorted largest first with ids matching their list index;
    the first is the main room. Raises NoRoomsError when nothing survives.
    """
    walls_removed = 0
    for region in get_all_regions(grid, WALL):
        if len(region) < min_wall_size:
            for x, y in region:
                grid[x][y] = OPEN
            walls_removed += 1

    survivors: List[List[Coord2D]] = []
    discarded = 0
    for region in get_all_regions(grid, OPEN):
        if len(region) < min_room_size:
            for x, y in region:
                grid[x][y] = WALL
            discarded += 1
        else:
            survivors.append(region)
    if not survivors:
        raise NoRoomsError(
            f"no open region reached min_room_size={min_room_size} ({discarded} discarded)"
        )

    size = len(grid)
    survivors.sort(key=len, reverse=True)
    rooms = [
        Room(room_id=i, tiles=tiles, grid_size=size, edge_tiles=find_edge_tiles(grid, tiles))
        for i, tiles in enumerate(survivors)
    ]
    rooms[0].is_main = True
    rooms[0].reaches_main = True

    if metrics is not None:
        metrics["wall_regions_removed"] = metrics.get("wall_regions_removed", 0) + walls_removed
        metrics["rooms_discarded"] = metrics.get("rooms_discarded", 0) + discarded
        metrics["rooms"] = len(rooms)
    log.debug(event="cave_rooms_cleaned", rooms=len(rooms), discarded=discarded, walls_removed=walls_removed)
    return rooms


__all__ = ["Room", "clean_up_regions", "find_edge_tiles"]
