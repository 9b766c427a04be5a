from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ujump.domain.exceptions import LevelParseError
from ujump.domain.level import Level, parse_level
from ujump.domain.rng import RandomSource


@dataclass(frozen=True)
class LevelPlan:
    name: str
    plan: str


DEMO_LEVEL = LevelPlan(
    name="demo",
    plan="""
......................
..#................#..
..#..............=.#..
..#.........o.o....#..
..#.@......#####...#..
..#####............#..
......#++++++++++++#..
......##############..
......................
""",
)

GAME_LEVELS: tuple[LevelPlan, ...] = (DEMO_LEVEL,)


def parse_levels(plans: Iterable[LevelPlan], rng: RandomSource | None = None) -> tuple[Level, ...]:
    """Parse every plan up front so a broken level fails before play starts."""
    levels: list[Level] = []
    for p in plans:
        try:
            levels.append(parse_level(p.plan, rng))
        except LevelParseError as e:
            raise LevelParseError(f"Level {p.name!r}: {e}") from e
    return tuple(levels)
