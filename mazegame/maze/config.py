from dataclasses import dataclass
from typing import Optional


@dataclass
class MazeConfig:
    width: int = 21
    height: int = 21
    seed: Optional[int] = None
    # 4 reproduces the original draw sequence (i = 0..3); 3 is the textbook Fisher-Yates bound
    shuffle_passes: int = 4


__all__ = ["MazeConfig"]
