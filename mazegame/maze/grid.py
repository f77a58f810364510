"""Fixed-size 2D grid of maze cells.

Cells live in a single flat list indexed ``y * width + x``. Every in-bounds
coordinate owns exactly one Cell; anything outside the rectangle is treated
as a wall by the queries below and is never stored.
"""

from __future__ import annotations

from typing import Iterator, List

from .cells import Cell, Coord2D
from .errors import InvalidDimensions, OutOfBounds


class Grid:
    __slots__ = ("width", "height", "_cells")

    def __init__(self, width: int, height: int):
        if not isinstance(width, int) or not isinstance(height, int) or width < 1 or height < 1:
            raise InvalidDimensions(width, height, minimum=1)
        self.width = width
        self.height = height
        self._cells: List[Cell] = [Cell() for _ in range(width * height)]

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        """Direct cell access for callers that skip the bounds-safe queries."""
        if not self.is_inside(x, y):
            raise OutOfBounds(x, y, self.width, self.height)
        return self._cells[y * self.width + x]

    def is_wall(self, x: int, y: int) -> bool:
        if not self.is_inside(x, y):
            return True
        return self._cells[y * self.width + x].is_wall

    def set_passage(self, x: int, y: int) -> None:
        if self.is_inside(x, y):
            self._cells[y * self.width + x].is_wall = False

    def mark_visited(self, x: int, y: int) -> None:
        if self.is_inside(x, y):
            self._cells[y * self.width + x].visited = True

    def is_visited(self, x: int, y: int) -> bool:
        if not self.is_inside(x, y):
            return False
        return self._cells[y * self.width + x].visited

    def reset_visited(self) -> None:
        for c in self._cells:
            c.visited = False

    def coords(self) -> Iterator[Coord2D]:
        """Row-major iteration over every in-bounds coordinate."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def count_walls(self) -> int:
        return sum(1 for c in self._cells if c.is_wall)

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self):
        return f"<Grid {self.width}x{self.height} walls={self.count_walls()}>"


__all__ = ["Grid"]
