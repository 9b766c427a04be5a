from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Protocol

from ujump.domain.input_state import InputState
from ujump.domain.status import Status
from ujump.domain.tiles import TileKind
from ujump.domain.vector import ZERO, Vector

if TYPE_CHECKING:
    from ujump.domain.game_state import State


class ActorKind(Enum):
    PLAYER = "player"
    LAVA = "lava"
    COIN = "coin"


# Every instance of a kind has the same bounding box.
ACTOR_SIZES: dict[ActorKind, Vector] = {
    ActorKind.PLAYER: Vector(0.8, 1.5),
    ActorKind.LAVA: Vector(1.0, 1.0),
    ActorKind.COIN: Vector(0.6, 0.6),
}


class Actor(Protocol):
    """
    A dynamic object in a State. Implementations are immutable:
    update() and collide() always build new values.
    """
    kind: ClassVar[ActorKind]
    pos: Vector

    @property
    def size(self) -> Vector:
        ...

    def update(self, dt: float, state: State, inp: InputState) -> Actor:
        ...

    def collide(self, state: State) -> State:
        ...


@dataclass(frozen=True)
class Player:
    kind: ClassVar[ActorKind] = ActorKind.PLAYER

    pos: Vector
    speed: Vector = ZERO

    @property
    def size(self) -> Vector:
        return ACTOR_SIZES[self.kind]

    @staticmethod
    def create(pos: Vector) -> Player:
        # One and a half cells tall, so it starts half a cell above its '@'.
        return Player(pos=pos + Vector(0.0, -0.5))

    def update(self, dt: float, state: State, inp: InputState) -> Player:
        physics = state.physics
        level = state.level

        # Horizontal: no inertia, speed comes straight from the keys.
        x_speed = 0.0
        if inp.left:
            x_speed -= physics.player_x_speed
        if inp.right:
            x_speed += physics.player_x_speed

        pos = self.pos
        moved_x = pos + Vector(x_speed * dt, 0.0)
        if not level.touches(moved_x, self.size, TileKind.WALL):
            pos = moved_x

        # Vertical: integrate gravity, jump only when landing on something.
        y_speed = self.speed.y + dt * physics.gravity
        moved_y = pos + Vector(0.0, y_speed * dt)
        if not level.touches(moved_y, self.size, TileKind.WALL):
            pos = moved_y
        elif inp.jump and y_speed > 0:
            y_speed = -physics.jump_speed
        else:
            y_speed = 0.0

        return Player(pos=pos, speed=Vector(x_speed, y_speed))

    def collide(self, state: State) -> State:
        return state


@dataclass(frozen=True)
class Lava:
    kind: ClassVar[ActorKind] = ActorKind.LAVA

    pos: Vector
    speed: Vector
    reset: Vector | None = None  # set only for dripping lava

    @property
    def size(self) -> Vector:
        return ACTOR_SIZES[self.kind]

    @property
    def is_dripping(self) -> bool:
        return self.reset is not None

    @staticmethod
    def create(pos: Vector, ch: str) -> Lava:
        if ch == "=":
            return Lava(pos=pos, speed=Vector(2.0, 0.0))
        if ch == "|":
            return Lava(pos=pos, speed=Vector(0.0, 2.0))
        if ch == "v":
            return Lava(pos=pos, speed=Vector(0.0, 3.0), reset=pos)
        raise ValueError(f"Not a lava character: {ch!r}")

    def update(self, dt: float, state: State, inp: InputState) -> Lava:
        new_pos = self.pos + self.speed * dt
        if not state.level.touches(new_pos, self.size, TileKind.WALL):
            return Lava(pos=new_pos, speed=self.speed, reset=self.reset)
        if self.reset is not None:
            return Lava(pos=self.reset, speed=self.speed, reset=self.reset)
        return Lava(pos=self.pos, speed=self.speed * -1.0)

    def collide(self, state: State) -> State:
        return replace(state, status=Status.LOST)


@dataclass(frozen=True)
class Coin:
    kind: ClassVar[ActorKind] = ActorKind.COIN

    pos: Vector
    base_pos: Vector
    wobble: float  # phase, radians

    @property
    def size(self) -> Vector:
        return ACTOR_SIZES[self.kind]

    @staticmethod
    def create(pos: Vector, phase: float) -> Coin:
        base_pos = pos + Vector(0.2, 0.1)
        return Coin(pos=base_pos, base_pos=base_pos, wobble=phase)

    def update(self, dt: float, state: State, inp: InputState) -> Coin:
        # Coins stay inside their own cell, so the grid is never consulted.
        physics = state.physics
        wobble = self.wobble + dt * physics.wobble_speed
        offset = math.sin(wobble) * physics.wobble_dist
        return Coin(pos=self.base_pos + Vector(0.0, offset), base_pos=self.base_pos, wobble=wobble)

    def collide(self, state: State) -> State:
        # Identity, not equality: two coins may carry equal field values.
        remaining = tuple(a for a in state.actors if a is not self)
        status = state.status
        if not any(a.kind is ActorKind.COIN for a in remaining):
            status = Status.WON
        return replace(state, actors=remaining, status=status)


def overlap(a: Actor, b: Actor) -> bool:
    """Strict box intersection: touching edges do not count."""
    return (
        a.pos.x + a.size.x > b.pos.x
        and a.pos.x < b.pos.x + b.size.x
        and a.pos.y + a.size.y > b.pos.y
        and a.pos.y < b.pos.y + b.size.y
    )
