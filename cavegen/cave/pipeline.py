"""Pipeline orchestration for cave generation.

Provides the public ``Cave`` object: construct it with an area descriptor
and a config and the whole pipeline runs to completion before the
constructor returns.

Phases:
    1. seeded random fill (closed edges forced to WALL)
    2. transition gap carve (terminal areas only)
    3. ``smooth_amount`` smoothing passes with edge stitching
    4. region cleanup and room extraction
    5. room connection (nearest pass, then reachability repair)
    6. one finishing smoothing pass
    7. hand-off to the mesh builder, when one is supplied
"""
from __future__ import annotations

import time
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..logging_utils import get_logger
from .area import Area, EdgePattern
from .boundary import BoundaryStitcher, edge_pattern, transition_side
from .cells import Grid, in_range
from .config import MIN_TERMINAL_SIZE, CaveConfig, apply_overrides
from .connectivity import connect_all_rooms
from .errors import CaveConfigError, CaveGenerationError
from .generator import random_fill
from .metrics import init_metrics
from .rng import SeededRandom, random_seed
from .rooms import Room, clean_up_regions
from .smoothing import smooth
from .tiles import OPEN, WALL

log = get_logger("cave.pipeline")

# mesh_builder(grid, square_size, seed, area); return value is ignored
MeshBuilder = Callable[[Grid, int, Any, Area], Any]


@dataclass
class Cave:
    area: Area = field(default_factory=Area)
    config: CaveConfig = field(default_factory=CaveConfig)
    parent_edge: Optional[EdgePattern] = None
    is_root: bool = True
    is_terminal: bool = False
    mesh_builder: Optional[MeshBuilder] = None

    def __post_init__(self):
        # Work on a copy so overrides never leak back into the caller's config
        self.config = apply_overrides(replace(self.config))
        self.config.validate()
        if self.is_terminal:
            if self.config.size < MIN_TERMINAL_SIZE:
                raise CaveConfigError("size", f"terminal areas need size >= {MIN_TERMINAL_SIZE}", "min")
            if transition_side(self.area) is None:
                raise CaveConfigError("area", "terminal area has no outward side", "transition_side")
        self.stitcher = BoundaryStitcher(self.area, self.config.size, self.parent_edge, self.is_root)
        # None seed => random, same as use_random_seed
        if self.config.use_random_seed or self.config.seed is None:
            self.config.seed = random_seed()
        self.seed = self.config.seed
        self.metrics: Dict[str, Any] = init_metrics() if self.config.enable_metrics else {}
        self.grid: Grid = []
        self.rooms: List[Room] = []
        self.transition: Optional[Tuple[int, int]] = None
        try:
            self._run_pipeline()
        except CaveGenerationError as exc:
            log.error(event="cave_generation_failed", area=self.area.identity, seed=self.seed, error=exc)
            raise

    @property
    def size(self) -> int:
        return self.config.size

    @property
    def main_room(self) -> Room:
        return self.rooms[0]

    def _run_pipeline(self):
        """Execute ordered generation phases, timing each when metrics are on."""
        cfg = self.config
        if cfg.enable_metrics:
            start = time.perf_counter()
            phase_times = {}

            def _phase(label, fn, *a, **k):
                ps = time.perf_counter()
                r = fn(*a, **k)
                phase_times[label] = int((time.perf_counter() - ps) * 1000)
                return r
        else:
            def _phase(label, fn, *a, **k):
                return fn(*a, **k)

        log.debug(event="cave_generation_start", area=self.area.identity, seed=self.seed, size=cfg.size)
        metrics = self.metrics if cfg.enable_metrics else None
        rng = SeededRandom(self.seed)
        self.grid = _phase('random_fill', random_fill, cfg.size, self.area, cfg.fill_percent, rng)
        if self.is_terminal:
            self.transition = _phase('transition_edge', self.stitcher.carve_transition_gap, self.grid, rng)
        _phase('smooth', smooth, self.grid, cfg.smooth_amount, self.stitcher)
        self.rooms = _phase(
            'cleanup', clean_up_regions, self.grid, cfg.min_wall_size, cfg.min_room_size, metrics
        )
        _phase('connect_rooms', connect_all_rooms, self.grid, self.rooms, cfg.passage_radius, metrics)
        _phase('smooth_final', smooth, self.grid, 1, self.stitcher)

        if cfg.enable_metrics:
            self._collect_counts()
            self.metrics['runtime_ms'] = int((time.perf_counter() - start) * 1000)
            self.metrics['phase_ms'] = phase_times
        log.info(
            event="cave_generation_complete",
            area=self.area.identity,
            seed=self.seed,
            rooms=len(self.rooms),
            runtime_ms=self.metrics.get('runtime_ms'),
        )
        if self.mesh_builder is not None:
            self.mesh_builder(self.grid, cfg.square_size, self.seed, self.area)

    def _collect_counts(self):
        open_cells = sum(col.count(OPEN) for col in self.grid)
        self.metrics.update(
            {
                "seed": self.seed,
                "open_cells": open_cells,
                "wall_cells": self.size * self.size - open_cells,
            }
        )

    # Convenience outputs
    def is_open(self, x: int, y: int) -> bool:
        return in_range(self.size, x, y) and self.grid[x][y] == OPEN

    def edge_pattern(self, side: int) -> EdgePattern:
        """This cave's boundary on ``side``, to seed a child area there."""
        return edge_pattern(self.grid, side)

    def to_ascii(self) -> str:
        # Top row (y = size-1) printed first
        chars = {WALL: "#", OPEN: "."}
        return "\n".join(
            "".join(chars[self.grid[x][y]] for x in range(self.size)) for y in range(self.size - 1, -1, -1)
        )

    def to_json(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "area": self.area.identity,
            "size": self.size,
            "grid": [[self.grid[x][y] for x in range(self.size)] for y in range(self.size)],
            "rooms": [
                {"id": r.room_id, "size": r.size, "is_main": r.is_main, "reaches_main": r.reaches_main,
                 "connected": sorted(r.connected)}
                for r in self.rooms
            ],
            "metrics": self.metrics,
        }


def create_cave(
    area: Area,
    parent_edge: Optional[EdgePattern] = None,
    size: int = 50,
    start: bool = False,
    end: bool = False,
    config: Optional[CaveConfig] = None,
    mesh_builder: Optional[MeshBuilder] = None,
) -> Cave:
    """Generate one area. ``start`` marks the root area, ``end`` a terminal one."""
    cfg = replace(config or CaveConfig(), size=size)
    return Cave(
        area=area,
        config=cfg,
        parent_edge=parent_edge,
        is_root=start,
        is_terminal=end,
        mesh_builder=mesh_builder,
    )


__all__ = ["Cave", "create_cave", "MeshBuilder"]
