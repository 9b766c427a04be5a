from __future__ import annotations

from enum import Enum


class Status(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self is not Status.PLAYING
