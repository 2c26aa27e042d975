"""Public cave package interface.

    from cavegen.cave import Area, Cave, CaveConfig, create_cave, WALL, OPEN
"""

from .area import Area, EdgePattern
from .config import CaveConfig
from .errors import CaveConfigError, CaveGenerationError, NoRoomsError, OutOfBoundsError
from .pipeline import Cave, create_cave
from .rng import SeededRandom
from .tiles import BOTTOM, LEFT, OPEN, RIGHT, TOP, WALL, opposite_side

__all__ = [
    "Area",
    "EdgePattern",
    "Cave",
    "CaveConfig",
    "create_cave",
    "SeededRandom",
    "CaveGenerationError",
    "CaveConfigError",
    "NoRoomsError",
    "OutOfBoundsError",
    "WALL",
    "OPEN",
    "TOP",
    "RIGHT",
    "BOTTOM",
    "LEFT",
    "opposite_side",
]
