from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Physics:
    """
    Tuning constants shared by every actor in a run.
    Speeds are in cells per second, gravity in cells per second squared.
    """
    player_x_speed: float = 7.0
    gravity: float = 30.0
    jump_speed: float = 17.0
    wobble_speed: float = 8.0   # radians per second
    wobble_dist: float = 0.07   # cells


DEFAULT_PHYSICS = Physics()
