"""Exception types raised by cave generation.

Generation is deterministic for a given seed, so every failure here is
reproducible; callers should change parameters rather than retry.
"""
from __future__ import annotations


class CaveGenerationError(Exception):
    """Base class for all cave generation failures."""


class CaveConfigError(CaveGenerationError):
    def __init__(self, field: str, message: str, code: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message
        self.code = code


class NoRoomsError(CaveGenerationError):
    """Cleanup removed every open region, so there is no main room."""


class OutOfBoundsError(CaveGenerationError, IndexError):
    def __init__(self, x: int, y: int, size: int):
        super().__init__(f"({x},{y}) outside grid of size {size}")
        self.x = x
        self.y = y
        self.size = size


__all__ = ["CaveGenerationError", "CaveConfigError", "NoRoomsError", "OutOfBoundsError"]
