from typing import Tuple


class Cell:
    """Single grid cell: a wall until carved, unvisited until generation reaches it."""

    __slots__ = ("is_wall", "visited")

    def __init__(self, is_wall: bool = True, visited: bool = False):
        self.is_wall = is_wall
        self.visited = visited

    def __repr__(self):
        return f"Cell(is_wall={self.is_wall}, visited={self.visited})"


Coord2D = Tuple[int, int]
