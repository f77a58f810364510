"""Randomized recursive-backtracking maze carving on the odd-coordinate sublattice.

Phases:
    * Enter a cell: mark it visited, carve it, shuffle the four unit directions.
    * Walk the shuffled directions; for each unvisited in-bounds cell two steps
      away, carve the single wall cell between them and descend into it.
    * Backtrack when a cell has no unvisited two-step neighbour left.
    * Force the fixed exit cell ``(width-2, height-2)`` to passage.

The descent uses an explicit stack of frames instead of the call stack. Each
frame keeps its shuffled direction list and a cursor, so cells are entered and
RNG draws are consumed in exactly the order the recursive formulation would
produce, without the recursion limit on large grids.
"""

from __future__ import annotations

import random
import time
from typing import Dict, List, NamedTuple, Optional

from .cells import Coord2D
from .errors import InvalidDimensions, OutOfBounds
from .grid import Grid

START: Coord2D = (1, 1)
MIN_SIZE = 3


def base_directions() -> List[Coord2D]:
    return [(0, -1), (0, 1), (-1, 0), (1, 0)]


def shuffle_directions(rng, passes: int = 4) -> List[Coord2D]:
    """Fisher-Yates over the four unit directions using ``rng.randint`` (closed range).

    ``passes=4`` also draws ``randint(3, 3)`` on the last step, which swaps the
    final element with itself; the permutation stays uniform either way.
    """
    directions = base_directions()
    for i in range(passes):
        j = rng.randint(i, 3)
        directions[i], directions[j] = directions[j], directions[i]
    return directions


def exit_for(width: int, height: int) -> Coord2D:
    return width - 2, height - 2


class GenerationOutputs(NamedTuple):
    exit: Coord2D
    metrics: Dict[str, int]


class _Frame:
    __slots__ = ("x", "y", "directions", "index")

    def __init__(self, x: int, y: int, directions: List[Coord2D]):
        self.x = x
        self.y = y
        self.directions = directions
        self.index = 0


class MazeGenerator:
    def __init__(self, grid: Grid, rng: Optional[random.Random] = None, shuffle_passes: int = 4):
        if not 0 <= shuffle_passes <= 4:
            raise ValueError("shuffle_passes must be between 0 and 4")
        self.grid = grid
        self.rng = rng if rng is not None else random.Random()
        self.shuffle_passes = shuffle_passes
        self.cells_visited = 0
        self.max_stack_depth = 0

    def _enter(self, x: int, y: int) -> _Frame:
        self.grid.mark_visited(x, y)
        self.grid.set_passage(x, y)
        self.cells_visited += 1
        return _Frame(x, y, shuffle_directions(self.rng, self.shuffle_passes))

    def carve(self, start: Coord2D = START) -> None:
        grid = self.grid
        sx, sy = start
        if not grid.is_inside(sx, sy):
            raise OutOfBounds(sx, sy, grid.width, grid.height)
        stack = [self._enter(sx, sy)]
        self.max_stack_depth = 1
        while stack:
            frame = stack[-1]
            if frame.index >= len(frame.directions):
                stack.pop()
                continue
            dx, dy = frame.directions[frame.index]
            frame.index += 1
            nx, ny = frame.x + dx * 2, frame.y + dy * 2
            if grid.is_inside(nx, ny) and not grid.is_visited(nx, ny):
                grid.set_passage(frame.x + dx, frame.y + dy)
                stack.append(self._enter(nx, ny))
                if len(stack) > self.max_stack_depth:
                    self.max_stack_depth = len(stack)

    def carve_exit(self) -> Coord2D:
        # Unconditional: the exit may sit off the sublattice on even-sized grids
        ex, ey = exit_for(self.grid.width, self.grid.height)
        self.grid.set_passage(ex, ey)
        return ex, ey

    def run(self, start: Coord2D = START) -> GenerationOutputs:
        if self.grid.width < MIN_SIZE or self.grid.height < MIN_SIZE:
            raise InvalidDimensions(self.grid.width, self.grid.height, minimum=MIN_SIZE)
        t0 = time.perf_counter()
        self.carve(start)
        exit_pos = self.carve_exit()
        metrics = {
            "cells_visited": self.cells_visited,
            "max_stack_depth": self.max_stack_depth,
            "runtime_ms": int((time.perf_counter() - t0) * 1000),
        }
        return GenerationOutputs(exit_pos, metrics)


__all__ = [
    "MazeGenerator",
    "GenerationOutputs",
    "shuffle_directions",
    "base_directions",
    "exit_for",
    "START",
    "MIN_SIZE",
]
