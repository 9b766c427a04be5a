from __future__ import annotations

from dataclasses import dataclass

from ujump.domain.actors import Actor, ActorKind, Player, overlap
from ujump.domain.input_state import InputState
from ujump.domain.level import Level
from ujump.domain.physics import DEFAULT_PHYSICS, Physics
from ujump.domain.status import Status
from ujump.domain.tiles import TileKind


@dataclass(frozen=True)
class State:
    """
    Snapshot of a running level. Persistent: update() returns a new State
    and leaves this one intact. level and physics are shared, never copied.
    """
    level: Level
    actors: tuple[Actor, ...]
    status: Status = Status.PLAYING
    physics: Physics = DEFAULT_PHYSICS

    @staticmethod
    def start(level: Level, physics: Physics = DEFAULT_PHYSICS) -> State:
        return State(level=level, actors=level.start_actors, status=Status.PLAYING, physics=physics)

    @property
    def player(self) -> Player:
        for actor in self.actors:
            if isinstance(actor, Player):
                return actor
        raise LookupError("State has no player actor.")

    @property
    def coins_left(self) -> int:
        return sum(1 for a in self.actors if a.kind is ActorKind.COIN)

    def update(self, dt: float, inp: InputState) -> State:
        # Finished levels are frozen: nothing moves and the status sticks.
        if self.status.is_terminal:
            return self

        # Every actor moves against this same snapshot, so list order
        # never changes where anything ends up.
        actors = tuple(actor.update(dt, self, inp) for actor in self.actors)
        new_state = State(level=self.level, actors=actors, status=self.status, physics=self.physics)

        player = new_state.player
        if self.level.touches(player.pos, player.size, TileKind.LAVA):
            return State(level=self.level, actors=actors, status=Status.LOST, physics=self.physics)

        for actor in actors:
            if actor is not player and overlap(actor, player):
                new_state = actor.collide(new_state)
        return new_state
