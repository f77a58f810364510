"""Movement rules for an agent walking a generated maze.

``attempt_move`` is the pure rule: given the time since the last consumed
move, it either rejects on timing (nothing changes), bumps into a wall (the
cooldown window is still consumed), or steps into the passage.

``Navigator`` threads the position and last-move timestamp through that rule
for one play session. Time comes from an injectable monotonic clock; callers
may also pass ``now`` explicitly.
"""

from __future__ import annotations

import time
from typing import Callable, Dict, NamedTuple, Optional

from .cells import Coord2D

DEFAULT_MOVE_COOLDOWN = 0.2

# Screen coordinates: y grows downward
DIRECTIONS: Dict[str, Coord2D] = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}
DIRECTION_ALIASES = {"n": "up", "s": "down", "w": "left", "e": "right"}


class MoveResult(NamedTuple):
    position: Coord2D
    accepted: bool
    cooldown_consumed: bool


def attempt_move(current: Coord2D, delta: Coord2D, elapsed_since_last_move: float, cooldown: float, maze) -> MoveResult:
    x, y = current
    if elapsed_since_last_move < cooldown:
        return MoveResult((x, y), False, False)
    dx, dy = delta
    nx, ny = x + dx, y + dy
    if maze.is_wall(nx, ny):
        return MoveResult((x, y), False, True)
    return MoveResult((nx, ny), True, True)


def resolve_direction(name: str) -> Coord2D:
    key = (name or "").strip().lower()
    key = DIRECTION_ALIASES.get(key, key)
    if key not in DIRECTIONS:
        raise ValueError(f"unknown direction: {name!r}")
    return DIRECTIONS[key]


class Navigator:
    def __init__(
        self,
        maze,
        start: Optional[Coord2D] = None,
        cooldown: float = DEFAULT_MOVE_COOLDOWN,
        clock: Callable[[], float] = time.monotonic,
    ):
        if cooldown < 0:
            raise ValueError("cooldown must be non-negative")
        self.maze = maze
        self.position: Coord2D = tuple(start) if start is not None else tuple(maze.start)
        self.cooldown = cooldown
        self.clock = clock
        # -inf: the first move is never throttled by the clock's origin
        self.last_move_time = float("-inf")
        self.moves_accepted = 0
        self.moves_blocked = 0

    @property
    def x(self) -> int:
        return self.position[0]

    @property
    def y(self) -> int:
        return self.position[1]

    @property
    def at_exit(self) -> bool:
        return self.maze.is_exit(*self.position)

    def move(self, dx: int, dy: int, now: Optional[float] = None) -> MoveResult:
        if now is None:
            now = self.clock()
        result = attempt_move(self.position, (dx, dy), now - self.last_move_time, self.cooldown, self.maze)
        if result.cooldown_consumed:
            self.last_move_time = now
            if result.accepted:
                self.position = result.position
                self.moves_accepted += 1
            else:
                self.moves_blocked += 1
        return result

    def move_direction(self, name: str, now: Optional[float] = None) -> MoveResult:
        dx, dy = resolve_direction(name)
        return self.move(dx, dy, now=now)

    def to_dict(self):
        return {
            "position": list(self.position),
            "cooldown": self.cooldown,
            "moves_accepted": self.moves_accepted,
            "moves_blocked": self.moves_blocked,
            "at_exit": self.at_exit,
        }


__all__ = [
    "Navigator",
    "MoveResult",
    "attempt_move",
    "resolve_direction",
    "DIRECTIONS",
    "DEFAULT_MOVE_COOLDOWN",
]
