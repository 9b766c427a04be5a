from __future__ import annotations

import tkinter as tk
from collections.abc import Sequence

from ujump.app.config import GameConfig
from ujump.app.game_loop import GameLoop
from ujump.app.session import GameSession
from ujump.domain.level import Level
from ujump.domain.status import Status
from ujump.ui.input_mapper import TkInputMapper
from ujump.ui.tk_canvas_view import TkCanvasView


class GameApp:
    def __init__(self, levels: Sequence[Level], config: GameConfig) -> None:
        self.root = tk.Tk()
        self.root.title("U Just Jump")

        self.config = config

        # Viewport: whole level when small, otherwise a scrolling window.
        widest = max(level.width for level in levels)
        tallest = max(level.height for level in levels)
        width = min(widest * config.scale, 600)
        height = min(tallest * config.scale, 450)
        self.view = TkCanvasView(self.root, width=width, height=height, scale=config.scale)

        self.session = GameSession(
            levels,
            renderer=self.view,
            start_lives=config.start_lives,
            grace_period=config.grace_period,
            on_level_end=self._on_level_end,
        )
        self.input = TkInputMapper(self.root, on_pause=self.session.toggle_pause)

        self.loop = GameLoop(
            root=self.root,
            frame_fn=self._frame,
            fps=config.fps,
            max_step=config.max_step,
        )
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

    def run(self) -> bool | None:
        """Blocks until the window is closed; returns the session result.

        An exception raised while stepping a frame closes the window and
        propagates from here.
        """
        try:
            self.loop.run()
        except Exception:
            self.session.cancel()
            self._destroy()
            raise
        return self.session.result

    # ---------- Game loop ----------

    def _frame(self, dt: float) -> bool:
        keep_going = self.session.frame(dt, self.input.sample())
        if not keep_going:
            won = self.session.result
            self.view.show_message("You won!" if won else "Game over")
            self.root.title(f"U Just Jump - {'won' if won else 'game over'}")
        return keep_going

    def _on_level_end(self, index: int, status: Status) -> None:
        if status is Status.WON:
            self.root.title(f"U Just Jump - level {index + 1}/{self.session.level_count} cleared")
        else:
            self.root.title(f"U Just Jump - {self.session.lives - 1} lives left")

    def _on_close(self) -> None:
        self.loop.stop()
        self.session.cancel()
        self._destroy()

    def _destroy(self) -> None:
        try:
            self.root.destroy()
        except tk.TclError:
            # Already destroyed.
            pass
