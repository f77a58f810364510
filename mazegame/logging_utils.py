"""Minimal structured logging helper.

Emits one line per event as ``key=value`` pairs (or a compact JSON object when
``MAZE_LOG_JSON`` is truthy) with a timestamp, level and logger name. Server
mode additionally routes stdlib ``logging`` to a rotating file (see
``mazegame.server._configure_logging``); this helper stays print-based so the
maze core can log without any handler setup.

Usage:
    from mazegame.logging_utils import get_logger
    log = get_logger("mazegame.sessions")
    log.info(event="session_start", session_id=sid, width=31)

Values of None are dropped. Coordinates (tuples or lists of ints) render as
``x,y`` in key=value mode. ``bind()`` returns a logger that stamps the given
fields (typically ``session_id``) on every line. Reserved keys: level, ts, logger.
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
CURRENT_LEVEL = LEVELS.get(os.getenv("MAZE_LOG_LEVEL", "info").lower(), 20)
JSON_MODE = os.getenv("MAZE_LOG_JSON", "0") in ("1", "true", "TRUE", "yes", "on")


def set_level(name: str) -> int:
    """Change the global threshold at runtime (CLI --verbose, tests)."""
    global CURRENT_LEVEL
    if name not in LEVELS:
        raise ValueError(f"unknown log level: {name!r}")
    CURRENT_LEVEL = LEVELS[name]
    return CURRENT_LEVEL


def _format(level: str, **fields) -> str:
    ts = int(time.time())
    if JSON_MODE:
        rec = {k: v for k, v in fields.items() if v is not None}
        rec["level"] = level
        rec["ts"] = ts
        try:
            return json.dumps(rec, separators=(",", ":"), default=str)
        except (TypeError, ValueError):
            return json.dumps({"level": level, "ts": ts, "error": "json_encode_failed"})
    parts = [f"level={level}", f"ts={ts}"]
    for k, v in fields.items():
        if v is not None:
            parts.append(f"{k}={_plain(v)}")
    return " ".join(parts)


def _plain(v) -> str:
    if isinstance(v, (int, float)):
        return str(v)
    if isinstance(v, (tuple, list)) and v and all(isinstance(c, int) for c in v):
        return ",".join(str(c) for c in v)
    return str(v).replace(" ", "_")


class _Logger:
    def __init__(self, name: str | None = None, context: dict | None = None):
        self.name = name or "mazegame"
        self.context = dict(context or {})

    def bind(self, **context) -> "_Logger":
        merged = dict(self.context)
        merged.update(context)
        return _Logger(self.name, merged)

    def _log(self, lvl: str, **fields):
        if LEVELS[lvl] < CURRENT_LEVEL:
            return
        if self.context:
            fields = {**self.context, **fields}
        fields.setdefault("logger", self.name)
        print(_format(lvl, **fields), file=sys.stderr if lvl == "error" else sys.stdout)

    def debug(self, **fields):
        self._log("debug", **fields)

    def info(self, **fields):
        self._log("info", **fields)

    def warn(self, **fields):
        self._log("warn", **fields)

    def error(self, **fields):
        self._log("error", **fields)


_LOGGER_CACHE = {}


def get_logger(name: str):
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("mazegame")
