"""Difficulty and skin tables: pure session parameters for the presentation layer.

A level picks a cell size (smaller cells on a fixed screen give a larger
grid) and a wall colour; a skin picks the player and exit icons. None of
this touches generation beyond the grid dimensions it implies.
"""
from __future__ import annotations

from typing import Dict, NamedTuple, Tuple

DEFAULT_SCREEN: Tuple[int, int] = (1920, 1080)

DIFFICULTIES: Dict[str, Dict] = {
    "easy": {"level": 1, "label": "Facile", "cell_size": 50},
    "medium": {"level": 2, "label": "Moyen", "cell_size": 40},
    "hard": {"level": 3, "label": "Difficile", "cell_size": 30},
}

# Even levels draw dark walls, odd levels light ones
WALL_COLORS = {
    "LIGHTGRAY": "#c8c8c8",
    "DARKGRAY": "#505050",
}

SKINS: Dict[str, Dict[str, str]] = {
    "mouse": {"player_icon": "mouse", "exit_icon": "exit_jnn"},
    "man": {"player_icon": "man", "exit_icon": "exit_fm"},
    "cat": {"player_icon": "cat", "exit_icon": "exit_sc"},
}


class LevelSettings(NamedTuple):
    difficulty: str
    level: int
    cell_size: int
    width: int
    height: int
    wall_color: str
    wall_color_hex: str
    skin: str
    player_icon: str
    exit_icon: str

    def to_dict(self):
        return self._asdict()


def wall_color_for(level: int) -> str:
    return "DARKGRAY" if level % 2 == 0 else "LIGHTGRAY"


def grid_size_for(screen_width: int, screen_height: int, cell_size: int) -> Tuple[int, int]:
    if cell_size <= 0:
        raise ValueError("cell_size must be positive")
    return screen_width // cell_size, screen_height // cell_size


def settings_for(difficulty: str, skin: str = "mouse", screen: Tuple[int, int] | None = None) -> LevelSettings:
    key = (difficulty or "").strip().lower()
    if key not in DIFFICULTIES:
        raise ValueError(f"unknown difficulty: {difficulty!r}")
    skin_key = (skin or "").strip().lower()
    if skin_key not in SKINS:
        raise ValueError(f"unknown skin: {skin!r}")
    d = DIFFICULTIES[key]
    sw, sh = screen or DEFAULT_SCREEN
    width, height = grid_size_for(sw, sh, d["cell_size"])
    color = wall_color_for(d["level"])
    s = SKINS[skin_key]
    return LevelSettings(
        difficulty=key,
        level=d["level"],
        cell_size=d["cell_size"],
        width=width,
        height=height,
        wall_color=color,
        wall_color_hex=WALL_COLORS[color],
        skin=skin_key,
        player_icon=s["player_icon"],
        exit_icon=s["exit_icon"],
    )


def catalog() -> Dict[str, Dict]:
    return {
        "difficulties": {k: dict(v) for k, v in DIFFICULTIES.items()},
        "skins": {k: dict(v) for k, v in SKINS.items()},
    }


__all__ = [
    "LevelSettings",
    "DIFFICULTIES",
    "SKINS",
    "WALL_COLORS",
    "DEFAULT_SCREEN",
    "settings_for",
    "grid_size_for",
    "wall_color_for",
    "catalog",
]
