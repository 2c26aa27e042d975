"""Edge rules that make neighbouring areas line up.

* Parent-edge imprint: copy the parent's edge pattern into the rows/columns
  nearest the parent side so the seam matches.
* Closed edges: every side without a neighbour keeps a solid WALL border.
* Transition gap (terminal areas only): a WALL strip with an 8-cell opening
  on an outward side, the exit toward the next area.

Imprint and closed edges are re-applied before every smoothing pass; the
transition gap is carved once before smoothing starts.
"""
from __future__ import annotations

from typing import Optional, Tuple

from ..logging_utils import get_logger
from .area import Area, EdgePattern
from .cells import Grid
from .errors import CaveConfigError
from .rng import SeededRandom
from .tiles import BOTTOM, LEFT, OPEN, RIGHT, SIDES, TOP, WALL

log = get_logger("cave.boundary")

PARENT_EDGE_DEPTH = 3
GAP_STRIP_DEPTH = 10
GAP_WIDTH = 8
GAP_MARGIN = 15


def _side_lines(size: int, side: int, depth: int):
    """Yield the fixed coordinate of each of the ``depth`` lines nearest ``side``."""
    if side in (TOP, RIGHT):
        return range(size - 1, size - 1 - depth, -1)
    return range(0, depth)


def set_side_strip(grid: Grid, side: int, depth: int, values) -> None:
    """Write ``values[i]`` along the ``depth`` lines nearest ``side``.

    For TOP/BOTTOM ``i`` runs over x, for LEFT/RIGHT over y.
    """
    size = len(grid)
    for line in _side_lines(size, side, min(depth, size)):
        for i in range(size):
            if side in (TOP, BOTTOM):
                grid[i][line] = values[i]
            else:
                grid[line][i] = values[i]


def edge_pattern(grid: Grid, side: int) -> EdgePattern:
    """Read this area's outermost row/column on ``side`` for a child area."""
    if side not in SIDES:
        raise ValueError(f"invalid side {side}")
    size = len(grid)
    if side == TOP:
        values = [grid[x][size - 1] for x in range(size)]
    elif side == BOTTOM:
        values = [grid[x][0] for x in range(size)]
    elif side == RIGHT:
        values = [grid[size - 1][y] for y in range(size)]
    else:
        values = [grid[0][y] for y in range(size)]
    return EdgePattern(side, values)


def transition_side(area: Area) -> Optional[int]:
    """Last side that has a neighbour and is not the parent side, or None."""
    chosen = None
    for side in SIDES:
        if area.is_child_edge(side) and area.parent_side != side:
            chosen = side
    return chosen


class BoundaryStitcher:
    def __init__(self, area: Area, size: int, parent_edge: Optional[EdgePattern] = None, is_root: bool = True):
        self.area = area
        self.size = size
        self.parent_edge = parent_edge
        self.is_root = is_root
        if not is_root:
            if parent_edge is None:
                raise CaveConfigError("parent_edge", "required for a non-root area", "required")
            if area.parent_side is None:
                raise CaveConfigError("parent_side", "required for a non-root area", "required")
            if not area.is_child_edge(area.parent_side):
                raise CaveConfigError("parent_side", "parent side must be flagged as a neighbour", "neighbor")
            if len(parent_edge) != size:
                raise CaveConfigError(
                    "parent_edge", f"pattern length {len(parent_edge)} != size {size}", "length"
                )

    def apply(self, grid: Grid) -> None:
        if not self.is_root:
            self.imprint_parent_edge(grid)
        self.ensure_closed_edges(grid)

    def imprint_parent_edge(self, grid: Grid) -> None:
        set_side_strip(grid, self.area.parent_side, PARENT_EDGE_DEPTH, self.parent_edge.pattern)

    def ensure_closed_edges(self, grid: Grid) -> None:
        size = self.size
        if not self.area.is_child_edge(TOP):
            for x in range(size):
                grid[x][size - 1] = WALL
        if not self.area.is_child_edge(RIGHT):
            for y in range(size):
                grid[size - 1][y] = WALL
        if not self.area.is_child_edge(BOTTOM):
            for x in range(size):
                grid[x][0] = WALL
        if not self.area.is_child_edge(LEFT):
            for y in range(size):
                grid[0][y] = WALL

    def carve_transition_gap(self, grid: Grid, rng: SeededRandom) -> Tuple[int, int]:
        """Carve the exit strip and return ``(side, offset)``."""
        side = transition_side(self.area)
        if side is None:
            raise CaveConfigError("area", "terminal area has no outward side", "transition_side")
        offset = rng.next(GAP_MARGIN, self.size - GAP_MARGIN)
        values = [OPEN if offset <= i < offset + GAP_WIDTH else WALL for i in range(self.size)]
        set_side_strip(grid, side, GAP_STRIP_DEPTH, values)
        log.info(event="cave_transition_edge", area=self.area.identity, side=side, offset=offset)
        return side, offset


__all__ = [
    "BoundaryStitcher",
    "edge_pattern",
    "set_side_strip",
    "transition_side",
    "PARENT_EDGE_DEPTH",
    "GAP_STRIP_DEPTH",
    "GAP_WIDTH",
    "GAP_MARGIN",
]
