from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from ujump.app.level_run import LevelRun, Renderer
from ujump.domain.input_state import InputState
from ujump.domain.level import Level
from ujump.domain.physics import DEFAULT_PHYSICS, Physics
from ujump.domain.status import Status

logger = logging.getLogger(__name__)


class GameSession:
    """
    Plays a sequence of levels with a limited number of lives.

    Losing a level costs a life and restarts it; winning moves on and
    refills the lives. The session is over when every level is won
    (result True) or the last life is lost (result False).
    """

    def __init__(
        self,
        levels: Sequence[Level],
        *,
        renderer: Renderer | None = None,
        start_lives: int = 3,
        grace_period: float = 1.0,
        physics: Physics = DEFAULT_PHYSICS,
        on_level_end: Callable[[int, Status], None] | None = None,
    ) -> None:
        if not levels:
            raise ValueError("A session needs at least one level.")
        if start_lives <= 0:
            raise ValueError("start_lives must be positive.")

        self._levels = tuple(levels)
        self._renderer = renderer
        self._start_lives = start_lives
        self._grace_period = grace_period
        self._physics = physics
        self._on_level_end = on_level_end

        self._level_index = 0
        self._lives = start_lives
        self._result: bool | None = None
        self._run: LevelRun | None = self._start_run()

    @property
    def level_index(self) -> int:
        return self._level_index

    @property
    def level_count(self) -> int:
        return len(self._levels)

    @property
    def lives(self) -> int:
        return self._lives

    @property
    def current_run(self) -> LevelRun | None:
        return self._run

    @property
    def finished(self) -> bool:
        return self._run is None

    @property
    def result(self) -> bool | None:
        """True when every level was won, False when lives ran out, None while playing or if cancelled."""
        return self._result

    def toggle_pause(self) -> None:
        if self._run is not None:
            self._run.toggle_pause()

    def cancel(self) -> None:
        if self._run is None:
            return
        self._run.cancel()
        self._run = None
        logger.info("Session cancelled")

    def frame(self, dt: float, inp: InputState) -> bool:
        """Advance the current level by one frame. Returns False once the session is over."""
        if self._run is None:
            return False
        if self._run.frame(dt, inp):
            return True

        status = self._run.outcome
        assert status is not None
        if self._on_level_end is not None:
            self._on_level_end(self._level_index, status)

        if status is Status.WON:
            self._level_index += 1
            self._lives = self._start_lives
            if self._level_index >= len(self._levels):
                return self._end(won=True)
            logger.info("Level won, moving to level %d of %d", self._level_index + 1, len(self._levels))
        else:
            self._lives -= 1
            if self._lives <= 0:
                return self._end(won=False)
            logger.info("Life lost, %d left", self._lives)

        self._run = self._start_run()
        return True

    def _start_run(self) -> LevelRun:
        return LevelRun(
            self._levels[self._level_index],
            renderer=self._renderer,
            physics=self._physics,
            grace_period=self._grace_period,
        )

    def _end(self, *, won: bool) -> bool:
        self._run = None
        self._result = won
        logger.info("Session finished: %s", "all levels won" if won else "out of lives")
        return False
