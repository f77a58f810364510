"""Maze error taxonomy.

Only dimension validation is fatal. Out-of-range coordinates are absorbed by
the bounds-safe queries (treated as walls) and only surface as ``OutOfBounds``
when a caller reaches for a cell directly.
"""

from __future__ import annotations

from typing import Optional


class MazeError(Exception):
    """Base class for maze core errors."""


class InvalidDimensions(MazeError, ValueError):
    def __init__(self, width, height, minimum: int = 1, maximum: Optional[int] = None):
        if maximum is None:
            bounds = f"minimum {minimum}x{minimum}"
        else:
            bounds = f"allowed {minimum}..{maximum} per side"
        super().__init__(f"invalid maze dimensions {width}x{height} ({bounds})")
        self.width = width
        self.height = height
        self.minimum = minimum
        self.maximum = maximum


class OutOfBounds(MazeError, IndexError):
    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"({x}, {y}) is outside the {width}x{height} grid")
        self.x = x
        self.y = y


__all__ = ["MazeError", "InvalidDimensions", "OutOfBounds"]
