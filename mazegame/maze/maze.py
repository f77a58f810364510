"""Maze value: a generated grid plus its single exit.

Public contract consumed elsewhere:
    Maze.generate(width, height, rng=None|seed|random.Random) OR Maze(MazeConfig(...))
    Queries: is_wall(x, y), is_exit(x, y); both pure, never raise
    Attributes: width, height, seed, exit, start, metrics
    Rendering helpers: wall_cells(), rows(), to_ascii(), to_dict()

Once the constructor returns, the grid is treated as read-only; the
generator's visited bookkeeping is cleared since it has no meaning afterwards.
"""

from __future__ import annotations

import random
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

from ..logging_utils import get_logger
from .cells import Coord2D
from .config import MazeConfig
from .errors import InvalidDimensions
from .generator import MIN_SIZE, START, MazeGenerator
from .grid import Grid
from .tiles import EXIT, PASSAGE, PATH, PLAYER, WALL

log = get_logger("mazegame.maze")

RngSource = Union[None, int, random.Random]


def _resolve_rng(source: RngSource):
    """Return (seed, rng). A Random instance passes through untouched (seed unknown)."""
    if source is None:
        seed = random.randint(0, 2**31 - 1)
        return seed, random.Random(seed)
    if isinstance(source, bool):
        raise TypeError("rng must be an int seed or a random.Random-like source")
    if isinstance(source, int):
        return source, random.Random(source)
    if hasattr(source, "randint"):
        return None, source
    raise TypeError("rng must be an int seed or a random.Random-like source")


class Maze:
    def __init__(self, config: MazeConfig | None = None, *, rng: RngSource = None):
        if config is None:
            config = MazeConfig()
        self.config = config
        width, height = config.width, config.height
        if not isinstance(width, int) or not isinstance(height, int) or width < MIN_SIZE or height < MIN_SIZE:
            raise InvalidDimensions(width, height, minimum=MIN_SIZE)
        seed, generator_rng = _resolve_rng(rng if rng is not None else config.seed)
        self.seed: Optional[int] = seed
        if self.config.seed is None:
            self.config.seed = seed
        self.width = width
        self.height = height
        self.start: Coord2D = START
        self._grid = Grid(width, height)
        outputs = MazeGenerator(self._grid, generator_rng, config.shuffle_passes).run(self.start)
        self._grid.reset_visited()
        self.exit: Coord2D = outputs.exit
        self.metrics: Dict[str, Any] = dict(outputs.metrics)
        self.metrics["tiles_wall"] = self._grid.count_walls()
        self.metrics["tiles_passage"] = len(self._grid) - self.metrics["tiles_wall"]
        log.debug(
            event="maze_generated",
            width=width,
            height=height,
            seed=self.seed,
            cells=self.metrics["cells_visited"],
            runtime_ms=self.metrics["runtime_ms"],
        )

    @classmethod
    def generate(cls, width: int, height: int, rng: RngSource = None, *, shuffle_passes: int = 4) -> "Maze":
        seed = rng if isinstance(rng, int) and not isinstance(rng, bool) else None
        config = MazeConfig(width=width, height=height, seed=seed, shuffle_passes=shuffle_passes)
        return cls(config, rng=rng)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def exit_x(self) -> int:
        return self.exit[0]

    @property
    def exit_y(self) -> int:
        return self.exit[1]

    def is_wall(self, x: int, y: int) -> bool:
        return self._grid.is_wall(x, y)

    def is_exit(self, x: int, y: int) -> bool:
        return (x, y) == self.exit

    def is_passage(self, x: int, y: int) -> bool:
        return not self._grid.is_wall(x, y)

    def passages(self) -> Iterator[Coord2D]:
        return (c for c in self._grid.coords() if not self._grid.is_wall(*c))

    # ------------------------------------------------------------------
    # Rendering helpers
    # ------------------------------------------------------------------
    def wall_cells(self) -> Iterator[Coord2D]:
        """Row-major wall coordinates; the draw callback paints these plus ``exit``."""
        return (c for c in self._grid.coords() if self._grid.is_wall(*c))

    def rows(self, player: Coord2D | None = None, path: Iterable[Coord2D] = ()) -> List[str]:
        marks = {p: PATH for p in path}
        marks[self.exit] = EXIT
        if player is not None:
            marks[tuple(player)] = PLAYER
        out = []
        for y in range(self.height):
            line = []
            for x in range(self.width):
                if (x, y) in marks:
                    line.append(marks[(x, y)])
                else:
                    line.append(WALL if self._grid.is_wall(x, y) else PASSAGE)
            out.append("".join(line))
        return out

    def to_ascii(self, player: Coord2D | None = None, path: Iterable[Coord2D] = ()) -> str:
        return "\n".join(self.rows(player=player, path=path))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "seed": self.seed,
            "start": list(self.start),
            "exit": list(self.exit),
            "rows": self.rows(),
            "metrics": dict(self.metrics),
        }

    def __repr__(self):
        return f"<Maze {self.width}x{self.height} seed={self.seed} exit={self.exit}>"


__all__ = ["Maze", "RngSource"]
