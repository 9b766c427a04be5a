from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass

from ujump.domain.actors import Actor, Coin, Lava, Player
from ujump.domain.exceptions import InvalidTileKindError, LevelParseError
from ujump.domain.rng import RandomSource
from ujump.domain.tiles import TileKind
from ujump.domain.vector import Vector

logger = logging.getLogger(__name__)


BACKGROUND_CHARS: dict[str, TileKind] = {
    ".": TileKind.EMPTY,
    "#": TileKind.WALL,
    "+": TileKind.LAVA,
}
PLAYER_CHAR = "@"
COIN_CHAR = "o"
LAVA_CHARS = frozenset("=|v")


@dataclass(frozen=True)
class Level:
    width: int
    height: int
    rows: tuple[tuple[TileKind, ...], ...]  # [row][col]
    start_actors: tuple[Actor, ...]

    def tile_at(self, x: int, y: int) -> TileKind:
        # Everything outside the map behaves like a wall.
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            return TileKind.WALL
        return self.rows[y][x]

    def touches(self, pos: Vector, size: Vector, kind: TileKind) -> bool:
        """True if any grid cell covered by the box [pos, pos + size) has the given kind."""
        if not isinstance(kind, TileKind):
            raise InvalidTileKindError(f"Unknown tile kind: {kind!r}")

        x_start = math.floor(pos.x)
        x_end = math.ceil(pos.x + size.x)
        y_start = math.floor(pos.y)
        y_end = math.ceil(pos.y + size.y)

        for y in range(y_start, y_end):
            for x in range(x_start, x_end):
                if self.tile_at(x, y) is kind:
                    return True
        return False


def parse_level(plan: str, rng: RandomSource | None = None) -> Level:
    """
    Build a Level from its text plan.

    rng only drives the coins' initial wobble phase; pass a seeded
    random.Random for a fully deterministic result.
    """
    if rng is None:
        rng = random.Random()

    lines = [line.strip() for line in plan.splitlines()]
    lines = [line for line in lines if line]
    if not lines:
        raise LevelParseError("Level plan is empty.")

    width = len(lines[0])
    rows: list[tuple[TileKind, ...]] = []
    actors: list[Actor] = []
    players = 0

    for y, line in enumerate(lines):
        if len(line) != width:
            raise LevelParseError(f"Row {y} has length {len(line)}, expected {width}.")

        row: list[TileKind] = []
        for x, ch in enumerate(line):
            kind = BACKGROUND_CHARS.get(ch)
            if kind is not None:
                row.append(kind)
                continue

            pos = Vector(float(x), float(y))
            if ch == PLAYER_CHAR:
                actors.append(Player.create(pos))
                players += 1
            elif ch == COIN_CHAR:
                actors.append(Coin.create(pos, rng.random() * math.pi * 2))
            elif ch in LAVA_CHARS:
                actors.append(Lava.create(pos, ch))
            else:
                raise LevelParseError(f"Unknown character {ch!r} at row {y}, column {x}.")
            # Cells that spawn actors are empty background.
            row.append(TileKind.EMPTY)
        rows.append(tuple(row))

    if players != 1:
        raise LevelParseError(f"Level must contain exactly one '{PLAYER_CHAR}', found {players}.")

    logger.debug("Parsed %dx%d level with %d actors", width, len(rows), len(actors))
    return Level(width=width, height=len(rows), rows=tuple(rows), start_actors=tuple(actors))
