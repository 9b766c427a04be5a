from __future__ import annotations

from enum import Enum


class TileKind(Enum):
    EMPTY = "empty"
    WALL = "wall"
    LAVA = "lava"
