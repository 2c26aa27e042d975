# Cell states and side indices centralized for modular imports
WALL = 0
OPEN = 1

# Sides of a square area. TOP is the y = size-1 row, RIGHT the x = size-1 column.
TOP = 0
RIGHT = 1
BOTTOM = 2
LEFT = 3
SIDES = (TOP, RIGHT, BOTTOM, LEFT)


def opposite_side(side: int) -> int:
    """Side of a neighbouring area that touches ``side`` of this one."""
    return (side + 2) % 4


__all__ = ["WALL", "OPEN", "TOP", "RIGHT", "BOTTOM", "LEFT", "SIDES", "opposite_side"]
