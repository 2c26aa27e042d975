"""Area descriptor and shared edge pattern.

Both belong to the layout layer that decides where areas sit relative to
each other. Generation only reads them: ``Area`` tells which sides have a
neighbour and which side leads back to the parent, ``EdgePattern`` carries
one boundary row/column between two adjacent areas.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .tiles import OPEN, SIDES, WALL


@dataclass(frozen=True)
class Area:
    identity: str = "root"
    neighbors: Tuple[bool, bool, bool, bool] = (False, False, False, False)
    parent_side: Optional[int] = None

    def __post_init__(self):
        if len(self.neighbors) != 4:
            raise ValueError("neighbors must have one flag per side")
        if self.parent_side is not None and self.parent_side not in SIDES:
            raise ValueError(f"invalid parent side {self.parent_side}")

    def is_child_edge(self, side: int) -> bool:
        """True when another area borders this one on ``side``."""
        return bool(self.neighbors[side])


@dataclass
class EdgePattern:
    side: int
    pattern: List[int] = field(default_factory=list)

    def __post_init__(self):
        if self.side not in SIDES:
            raise ValueError(f"invalid side {self.side}")
        self.pattern = list(self.pattern)
        for v in self.pattern:
            if v not in (WALL, OPEN):
                raise ValueError(f"edge pattern values must be {WALL} or {OPEN}, got {v!r}")

    def __len__(self) -> int:
        return len(self.pattern)


__all__ = ["Area", "EdgePattern"]
