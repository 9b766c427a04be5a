from __future__ import annotations

import logging
from enum import Enum
from typing import Protocol

from ujump.domain.game_state import State
from ujump.domain.input_state import InputState
from ujump.domain.level import Level
from ujump.domain.physics import DEFAULT_PHYSICS, Physics
from ujump.domain.status import Status

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    def render(self, state: State) -> None:
        ...

    def clear(self) -> None:
        ...


class RunPhase(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    ENDED = "ended"


class LevelRun:
    """
    Plays one level from its start state until it is won or lost.

    Driven from outside by frame(dt, inp). Once the status leaves
    "playing" the run keeps rendering for grace_period seconds, then
    clears the renderer and records the outcome.
    """

    def __init__(
        self,
        level: Level,
        *,
        renderer: Renderer | None = None,
        physics: Physics = DEFAULT_PHYSICS,
        grace_period: float = 1.0,
    ) -> None:
        self._renderer = renderer
        self._state = State.start(level, physics)
        self._grace_left = grace_period
        self._phase = RunPhase.RUNNING
        self._outcome: Status | None = None

        logger.info("Level run started (%dx%d, %d actors)", level.width, level.height, len(self._state.actors))
        if self._renderer is not None:
            self._renderer.render(self._state)

    @property
    def state(self) -> State:
        return self._state

    @property
    def phase(self) -> RunPhase:
        return self._phase

    @property
    def outcome(self) -> Status | None:
        """Won or lost once the run has ended normally; None before that or after cancel()."""
        return self._outcome

    def toggle_pause(self) -> None:
        if self._phase is RunPhase.RUNNING:
            self._phase = RunPhase.PAUSED
            logger.info("Paused")
        elif self._phase is RunPhase.PAUSED:
            self._phase = RunPhase.RUNNING
            logger.info("Resumed")

    def cancel(self) -> None:
        if self._phase is RunPhase.ENDED:
            return
        self._phase = RunPhase.ENDED
        logger.info("Level run cancelled")

    def frame(self, dt: float, inp: InputState) -> bool:
        """Advance one frame. Returns False once the run has ended."""
        if self._phase is RunPhase.ENDED:
            raise RuntimeError("frame() called on an ended level run.")
        if self._phase is RunPhase.PAUSED:
            return True

        was_playing = not self._state.status.is_terminal
        self._state = self._state.update(dt, inp)

        if not self._state.status.is_terminal:
            # Renderer errors during play are fatal to the session.
            self._render()
            return True

        if was_playing:
            logger.info("Level %s, finishing in %.2fs", self._state.status.value, self._grace_left)
        try:
            self._render()
        except Exception:
            logger.exception("Renderer failed while the level was finishing")
            self._finish()
            return False

        if self._grace_left > 0:
            self._grace_left -= dt
            return True

        self._finish()
        return False

    def _render(self) -> None:
        if self._renderer is not None:
            self._renderer.render(self._state)

    def _finish(self) -> None:
        if self._renderer is not None:
            try:
                self._renderer.clear()
            except Exception:
                logger.exception("Renderer failed to clear after the level ended")
        self._phase = RunPhase.ENDED
        self._outcome = self._state.status
        logger.info("Level run ended: %s", self._outcome.value)
