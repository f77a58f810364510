"""Public maze package interface."""

from .cells import Cell
from .config import MazeConfig
from .errors import InvalidDimensions, MazeError, OutOfBounds
from .generator import MazeGenerator, shuffle_directions
from .grid import Grid
from .maze import Maze
from .navigator import DIRECTIONS, MoveResult, Navigator, attempt_move
from .tiles import EXIT, PASSAGE, PLAYER, WALL  # noqa: F401

__all__ = [
    "Cell",
    "Grid",
    "Maze",
    "MazeConfig",
    "MazeGenerator",
    "Navigator",
    "MoveResult",
    "attempt_move",
    "shuffle_directions",
    "DIRECTIONS",
    "MazeError",
    "InvalidDimensions",
    "OutOfBounds",
    "WALL",
    "PASSAGE",
    "EXIT",
    "PLAYER",
]
