"""Play-session lifecycle service.

A session owns one Maze and one Navigator at a time. Reaching the exit ends
the level: the maze and navigator are torn down and a fresh maze (new seed,
same difficulty and skin) replaces them, which mirrors returning to the menu
and starting the next level.

Sessions live in a small in-process store guarded by a lock; the oldest one
is evicted once ``MAZE_SESSION_CACHE_MAX`` is exceeded. Each session also
carries its own lock, held while a move or a read touches its maze and
navigator, so concurrent requests for one session apply one at a time.
"""

from __future__ import annotations

import hashlib
import os
import random
import threading
import uuid
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Tuple

from mazegame.logging_utils import get_logger
from mazegame.maze import InvalidDimensions, Maze, MazeConfig, Navigator
from mazegame.maze.generator import MIN_SIZE, START, exit_for
from mazegame.maze.connectivity import shortest_path
from mazegame.maze.levels import LevelSettings, settings_for
from mazegame.maze.navigator import DEFAULT_MOVE_COOLDOWN

log = get_logger("mazegame.sessions")

SEED_MAX = 2**63 - 1


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


def coerce_seed(payload_seed) -> int:
    """Convert a provided seed (int, str or None) into a bounded non-negative int."""
    if payload_seed is None:
        return random.randint(1, 1_000_000)
    if isinstance(payload_seed, bool):
        raise ValueError("seed must be an int or string")
    if isinstance(payload_seed, int):
        return payload_seed % SEED_MAX
    if isinstance(payload_seed, str):
        s = payload_seed.strip()
        if not s:
            return random.randint(1, 1_000_000)
        if s.isdigit():
            return int(s) % SEED_MAX
        h = hashlib.sha256(s.encode("utf-8")).digest()
        return int.from_bytes(h[:8], "big") % SEED_MAX
    raise ValueError("seed must be an int or string")


@dataclass
class GameSession:
    id: str
    settings: LevelSettings
    seed: int
    maze: Maze
    navigator: Navigator
    levels_completed: int = 0
    completed_seeds: list = field(default_factory=list)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def to_dict(self, include_rows: bool = True) -> Dict:
        data = {
            "session_id": self.id,
            "settings": self.settings.to_dict(),
            "seed": self.seed,
            "position": list(self.navigator.position),
            "exit": list(self.maze.exit),
            "levels_completed": self.levels_completed,
            "navigator": self.navigator.to_dict(),
        }
        if include_rows:
            data["rows"] = self.maze.rows(player=self.navigator.position)
        return data


_sessions: Dict[str, GameSession] = {}
_sessions_lock = threading.Lock()
_clock: Callable[[], float] | None = None


def set_clock(clock: Callable[[], float] | None) -> None:
    """Override the navigator clock for new sessions (None restores time.monotonic)."""
    global _clock
    _clock = clock


def _build_level(settings: LevelSettings, seed: int, cooldown: float) -> Tuple[Maze, Navigator]:
    maze = Maze(MazeConfig(width=settings.width, height=settings.height, seed=seed))
    kwargs = {"cooldown": cooldown}
    if _clock is not None:
        kwargs["clock"] = _clock
    return maze, Navigator(maze, **kwargs)


def _check_playable(settings: LevelSettings, max_dimension: Optional[int]) -> None:
    w, h = settings.width, settings.height
    if max_dimension is not None and (w > max_dimension or h > max_dimension):
        raise InvalidDimensions(w, h, minimum=MIN_SIZE, maximum=max_dimension)
    if exit_for(w, h) == START:
        raise ValueError(f"a {w}x{h} level puts the exit on the start cell; use a larger screen")


def start_session(
    difficulty: str = "easy",
    skin: str = "mouse",
    seed=None,
    screen: Optional[Tuple[int, int]] = None,
    cooldown: Optional[float] = None,
    max_dimension: Optional[int] = None,
) -> GameSession:
    """Create a session for one difficulty/skin pair.

    ``max_dimension`` caps the grid derived from ``screen``; levels above it
    raise ``InvalidDimensions``. A level small enough that the exit coincides
    with the start raises ``ValueError``.
    """
    if screen is None:
        screen = (_env_int("MAZE_SCREEN_WIDTH", 1920), _env_int("MAZE_SCREEN_HEIGHT", 1080))
    settings = settings_for(difficulty, skin, screen)
    _check_playable(settings, max_dimension)
    if cooldown is None:
        cooldown = _env_float("MAZE_MOVE_COOLDOWN", DEFAULT_MOVE_COOLDOWN)
    resolved = coerce_seed(seed)
    maze, nav = _build_level(settings, resolved, cooldown)
    sess = GameSession(id=uuid.uuid4().hex, settings=settings, seed=resolved, maze=maze, navigator=nav)
    cap = _env_int("MAZE_SESSION_CACHE_MAX", 64)
    with _sessions_lock:
        _sessions[sess.id] = sess
        while len(_sessions) > max(cap, 1):
            oldest = next(iter(_sessions))
            _sessions.pop(oldest, None)
    log.bind(session_id=sess.id).info(
        event="session_start",
        difficulty=settings.difficulty,
        skin=settings.skin,
        width=settings.width,
        height=settings.height,
        seed=resolved,
    )
    return sess


def get_session(session_id: str) -> GameSession:
    with _sessions_lock:
        sess = _sessions.get(session_id)
    if sess is None:
        raise KeyError(session_id)
    return sess


def end_session(session_id: str) -> None:
    with _sessions_lock:
        if _sessions.pop(session_id, None) is None:
            raise KeyError(session_id)
    log.bind(session_id=session_id).info(event="session_end")


def clear_sessions() -> None:
    with _sessions_lock:
        _sessions.clear()


def _next_level(sess: GameSession) -> None:
    sess.completed_seeds.append(sess.seed)
    sess.levels_completed += 1
    sess.seed = coerce_seed(None)
    sess.maze, sess.navigator = _build_level(sess.settings, sess.seed, sess.navigator.cooldown)


def move(session_id: str, direction: str, now: Optional[float] = None) -> Dict:
    """Apply one directional intent; returns the move outcome and the (possibly new) level state."""
    sess = get_session(session_id)
    with sess.lock:
        return _apply_move(sess, direction, now)


def _apply_move(sess: GameSession, direction: str, now: Optional[float]) -> Dict:
    result = sess.navigator.move_direction(direction, now=now)
    reached_exit = result.accepted and sess.maze.is_exit(*result.position)
    payload = {
        "session_id": sess.id,
        "position": list(result.position),
        "accepted": result.accepted,
        "cooldown_consumed": result.cooldown_consumed,
        "reached_exit": reached_exit,
    }
    if reached_exit:
        finished_seed, finished_exit = sess.seed, sess.maze.exit
        _next_level(sess)
        log.bind(session_id=sess.id).info(
            event="level_complete",
            seed=finished_seed,
            exit=finished_exit,
            levels_completed=sess.levels_completed,
        )
        payload["next_level"] = sess.to_dict()
    return payload


def session_state(session_id: str) -> Dict:
    sess = get_session(session_id)
    with sess.lock:
        return sess.to_dict()


def hint(session_id: str) -> Optional[list]:
    """Shortest path from the current position to the exit (None when the exit is cut off)."""
    sess = get_session(session_id)
    with sess.lock:
        path = shortest_path(sess.maze, sess.navigator.position, sess.maze.exit)
    if path is None:
        return None
    return [list(p) for p in path]


__all__ = [
    "GameSession",
    "coerce_seed",
    "start_session",
    "get_session",
    "end_session",
    "clear_sessions",
    "move",
    "session_state",
    "hint",
    "set_clock",
]
