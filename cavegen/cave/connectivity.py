"""Room connection: carve passages until every room reaches the main room.

Two phases over the room graph:

* Phase A links each still-unconnected room to its nearest other room
  (closest pair of edge tiles). Cheap, greedy, may leave several islands.
* Phase B repeatedly links the globally closest (unreached, reached) pair
  and propagates reachability until nothing is left unreached.

Distances are squared Euclidean between edge tiles. Ties keep the first
pair found in list order.
"""
from __future__ import annotations

from collections import deque
from typing import Any, Dict, Iterable, List, NamedTuple, Optional

from ..logging_utils import get_logger
from .cells import Coord2D, Grid
from .errors import CaveGenerationError
from .rooms import Room
from .tunnels import carve_passage

log = get_logger("cave.connectivity")


class Passage(NamedTuple):
    distance: int
    room_a: Room
    room_b: Room
    tile_a: Coord2D
    tile_b: Coord2D


def _distance(a: Coord2D, b: Coord2D) -> int:
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2


def closest_passage(room_a: Room, candidates: Iterable[Room], best: Optional[Passage] = None) -> Optional[Passage]:
    """Fold ``room_a`` against ``candidates`` into the closest edge-tile pair.

    Skips ``room_a`` itself and rooms already connected to it. ``best`` seeds
    the fold so callers can reduce over several source rooms.
    """
    for room_b in candidates:
        if room_b.room_id == room_a.room_id or room_a.is_connected(room_b):
            continue
        for tile_a in room_a.edge_tiles:
            for tile_b in room_b.edge_tiles:
                d = _distance(tile_a, tile_b)
                if best is None or d < best.distance:
                    best = Passage(d, room_a, room_b, tile_a, tile_b)
    return best


def mark_reachable(rooms: List[Room], start: Room) -> int:
    """Flag ``start`` and everything connected to it as reaching the main room.

    Returns how many rooms flipped.
    """
    if start.reaches_main:
        return 0
    start.reaches_main = True
    flipped = 1
    q = deque([start.room_id])
    while q:
        rid = q.popleft()
        for other_id in rooms[rid].connected:
            other = rooms[other_id]
            if not other.reaches_main:
                other.reaches_main = True
                flipped += 1
                q.append(other_id)
    return flipped


def connect_rooms(rooms: List[Room], room_a: Room, room_b: Room) -> None:
    """Record a symmetric edge and spread reachability across it."""
    room_a.connected.add(room_b.room_id)
    room_b.connected.add(room_a.room_id)
    if room_a.reaches_main:
        mark_reachable(rooms, room_b)
    elif room_b.reaches_main:
        mark_reachable(rooms, room_a)


def create_passage(grid: Grid, rooms: List[Room], passage: Passage, radius: int) -> int:
    connect_rooms(rooms, passage.room_a, passage.room_b)
    return carve_passage(grid, passage.tile_a, passage.tile_b, radius)


def connect_nearest(grid: Grid, rooms: List[Room], radius: int) -> int:
    """Phase A: give every room without links one passage to its nearest room."""
    carved = 0
    for room_a in rooms:
        if room_a.connected:
            continue
        best = closest_passage(room_a, rooms)
        if best is not None:
            create_passage(grid, rooms, best, radius)
            carved += 1
    return carved


def ensure_reachability(grid: Grid, rooms: List[Room], radius: int) -> int:
    """Phase B: link the closest unreached/reached pair until all are reached."""
    passes = 0
    while True:
        unreached = [r for r in rooms if not r.reaches_main]
        if not unreached:
            return passes
        reached = [r for r in rooms if r.reaches_main]
        best: Optional[Passage] = None
        for room_a in unreached:
            best = closest_passage(room_a, reached, best)
        if best is None:
            raise CaveGenerationError(
                f"{len(unreached)} rooms unreachable and no candidate passage exists"
            )
        create_passage(grid, rooms, best, radius)
        passes += 1


def connect_all_rooms(
    grid: Grid, rooms: List[Room], radius: int, metrics: Optional[Dict[str, Any]] = None
) -> None:
    carved = connect_nearest(grid, rooms, radius)
    repairs = ensure_reachability(grid, rooms, radius)
    if metrics is not None:
        metrics["passages_carved"] = metrics.get("passages_carved", 0) + carved + repairs
        metrics["repair_passes"] = metrics.get("repair_passes", 0) + repairs
    log.debug(event="cave_rooms_connected", rooms=len(rooms), passages=carved + repairs, repairs=repairs)


__all__ = [
    "Passage",
    "closest_passage",
    "mark_reachable",
    "connect_rooms",
    "create_passage",
    "connect_nearest",
    "ensure_reachability",
    "connect_all_rooms",
]
