from __future__ import annotations

import logging
import time
import tkinter as tk
from collections.abc import Callable

logger = logging.getLogger(__name__)


class GameLoop:
    """
    Calls frame_fn(dt) roughly fps times per second from the Tk event loop.
    frame_fn returning False stops the loop. An exception from frame_fn
    stops the loop, quits the mainloop and is re-raised by run().
    """

    def __init__(
        self,
        *,
        root: tk.Misc,
        frame_fn: Callable[[float], bool],
        fps: int = 60,
        max_step: float = 0.1,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._root = root
        self._frame_fn = frame_fn
        self._target_ms = max(1, int(1000 / max(1, fps)))
        self._max_step = max_step
        self._clock = clock

        self._running = False
        self._after_id: str | None = None
        self._last_t = 0.0
        self._error: Exception | None = None

    @property
    def running(self) -> bool:
        return self._running

    @property
    def error(self) -> Exception | None:
        """The exception that stopped the loop, if any."""
        return self._error

    def run(self) -> None:
        """Start ticking and block in the Tk mainloop; re-raise a frame failure."""
        self.start()
        self._root.mainloop()
        if self._error is not None:
            raise self._error

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._last_t = self._clock()
        self._schedule_next()

    def stop(self) -> None:
        self._running = False
        if self._after_id is not None:
            try:
                self._root.after_cancel(self._after_id)
            except tk.TclError:
                # Root may already be destroyed; ignore during shutdown.
                pass
            finally:
                self._after_id = None

    def _schedule_next(self) -> None:
        self._after_id = self._root.after(self._target_ms, self._tick)

    def _tick(self) -> None:
        self._after_id = None
        if not self._running:
            return

        now = self._clock()
        dt = now - self._last_t
        self._last_t = now

        # Clamp to avoid huge dt after pauses/minimize.
        if dt > self._max_step:
            dt = self._max_step

        try:
            keep_going = self._frame_fn(dt)
        except Exception as e:
            # Tk only prints errors from after() callbacks; run() re-raises it.
            logger.exception("Frame callback failed; stopping the loop")
            self._error = e
            self.stop()
            self._root.quit()
            return

        if keep_going is False:
            self.stop()
            return

        self._schedule_next()
