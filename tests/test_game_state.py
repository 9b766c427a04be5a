import random

import pytest

from ujump.domain.actors import Coin, Lava, Player
from ujump.domain.game_state import State
from ujump.domain.input_state import InputState, NO_INPUT
from ujump.domain.level import parse_level
from ujump.domain.levels import DEMO_LEVEL
from ujump.domain.physics import DEFAULT_PHYSICS, Physics
from ujump.domain.status import Status
from ujump.domain.vector import Vector

RIGHT = InputState(right=True)


def level_for(plan: str):
    return parse_level(plan, random.Random(7))


def test_start_uses_the_level_actors():
    level = level_for(DEMO_LEVEL.plan)

    state = State.start(level)

    assert state.level is level
    assert state.actors is level.start_actors
    assert state.status is Status.PLAYING
    assert state.physics is DEFAULT_PHYSICS
    assert state.player.pos == Vector(4.0, 3.5)
    assert state.coins_left == 2


def test_player_lookup_fails_without_player():
    state = State(level=level_for("@."), actors=())

    with pytest.raises(LookupError):
        _ = state.player


def test_custom_physics_reaches_the_actors():
    level = level_for("..\n@.\n..\n..")
    state = State.start(level, Physics(gravity=10.0))

    after = state.update(0.1, NO_INPUT)

    assert after.physics is state.physics
    assert after.player.speed.y == pytest.approx(1.0)


def test_player_falls_until_the_border_stops_it():
    state = State.start(level_for("..\n@.\n..\n.."))

    ys = [state.player.pos.y]
    for _ in range(20):
        state = state.update(0.1, NO_INPUT)
        ys.append(state.player.pos.y)

    assert ys == sorted(ys)
    assert ys[-1] > ys[0]
    assert ys[-1] + state.player.size.y <= 4.0
    assert ys[-1] == ys[-5]
    assert state.player.speed.y == 0.0
    assert state.status is Status.PLAYING


def test_player_wedged_against_the_top_border_cannot_move():
    state = State.start(level_for("@.\n.."))
    start = state.player.pos

    for _ in range(5):
        state = state.update(1.0, RIGHT)

    assert state.player.pos == start
    assert state.status is Status.PLAYING


def test_walking_into_the_last_coin_wins():
    state = State.start(level_for("..\n@o\n.."))

    after = state.update(0.1, RIGHT)

    assert after.status is Status.WON
    assert after.coins_left == 0
    assert [type(a) for a in after.actors] == [Player]


def test_overlapping_coin_is_collected_on_first_step():
    level = level_for("...\n.@.\n...\n...")
    player = Player(pos=Vector(1.0, 1.0))
    coin = Coin(pos=Vector(1.1, 1.2), base_pos=Vector(1.1, 1.2), wobble=0.0)
    state = State(level=level, actors=(player, coin))

    after = state.update(0.1, NO_INPUT)

    assert after.status is Status.WON
    assert len(after.actors) == 1


def test_collecting_one_of_two_coins_keeps_playing():
    level = level_for("....\n.@..\n....\n....")
    near = Coin(pos=Vector(1.1, 1.2), base_pos=Vector(1.1, 1.2), wobble=0.0)
    far = Coin(pos=Vector(3.2, 0.1), base_pos=Vector(3.2, 0.1), wobble=0.0)
    state = State(level=level, actors=(Player(pos=Vector(1.0, 1.0)), near, far))

    after = state.update(0.1, NO_INPUT)

    assert after.status is Status.PLAYING
    assert after.coins_left == 1
    remaining = [a for a in after.actors if isinstance(a, Coin)]
    assert remaining[0].base_pos == far.base_pos


def test_walking_into_lava_tile_loses():
    state = State.start(level_for("..\n@+\n.."))

    after = state.update(0.1, RIGHT)

    assert after.status is Status.LOST


def test_lava_tile_beats_coin_pickup():
    level = level_for("@..\n.+.\n...\n...")
    player = Player(pos=Vector(0.5, 0.5))
    coin = Coin(pos=Vector(0.6, 0.9), base_pos=Vector(0.6, 0.9), wobble=0.0)
    state = State(level=level, actors=(player, coin))

    after = state.update(0.1, NO_INPUT)

    assert after.status is Status.LOST
    assert after.coins_left == 1


def test_touching_lava_actor_loses():
    level = level_for("...\n.@.\n...\n...")
    lava = Lava(pos=Vector(1.2, 1.5), speed=Vector(0.0, 0.0))
    state = State(level=level, actors=(Player(pos=Vector(1.0, 1.0)), lava))

    after = state.update(0.1, NO_INPUT)

    assert after.status is Status.LOST
    assert len(after.actors) == 2


def test_two_coins_collected_in_one_step():
    level = level_for("...\n.@.\n...\n...")
    first = Coin(pos=Vector(1.1, 1.2), base_pos=Vector(1.1, 1.2), wobble=0.0)
    second = Coin(pos=Vector(1.15, 1.3), base_pos=Vector(1.15, 1.3), wobble=0.0)
    state = State(level=level, actors=(Player(pos=Vector(1.0, 1.0)), first, second))

    after = state.update(0.1, NO_INPUT)

    assert after.status is Status.WON
    assert len(after.actors) == 1
    assert isinstance(after.actors[0], Player)


@pytest.mark.parametrize(
    "lava_first, expected",
    [
        # The coin's collide runs last and overwrites the lava's LOST.
        (True, Status.WON),
        (False, Status.LOST),
    ],
)
def test_collisions_fold_in_actor_order(lava_first, expected):
    level = level_for("...\n.@.\n...\n...")
    lava = Lava(pos=Vector(1.2, 1.5), speed=Vector(0.0, 0.0))
    last_coin = Coin(pos=Vector(1.1, 1.2), base_pos=Vector(1.1, 1.2), wobble=0.0)
    others = (lava, last_coin) if lava_first else (last_coin, lava)
    state = State(level=level, actors=(Player(pos=Vector(1.0, 1.0)), *others))

    after = state.update(0.1, NO_INPUT)

    assert after.status is expected
    assert after.coins_left == 0
    assert len(after.actors) == 2


def test_update_does_not_touch_the_previous_state():
    state = State.start(level_for(DEMO_LEVEL.plan))
    actors_before = state.actors

    a = state.update(0.05, RIGHT)
    b = state.update(0.05, RIGHT)

    assert a == b
    assert a is not b
    assert state.actors is actors_before
    assert state.status is Status.PLAYING
    assert state.player.pos == Vector(4.0, 3.5)


def test_finished_state_is_frozen():
    level = level_for("..\n@o\n..")
    won = State.start(level).update(0.1, RIGHT)
    lost = State(level=level, actors=level.start_actors, status=Status.LOST)

    assert won.update(0.1, RIGHT) is won
    assert lost.update(1.0, InputState(left=True, jump=True)) is lost


def test_actor_list_never_holds_the_same_actor_twice():
    state = State.start(level_for(DEMO_LEVEL.plan))
    inputs = [RIGHT] * 30 + [InputState(right=True, jump=True)] * 30

    for inp in inputs:
        state = state.update(1 / 60, inp)
        assert len({id(a) for a in state.actors}) == len(state.actors)
        assert sum(isinstance(a, Player) for a in state.actors) == 1
