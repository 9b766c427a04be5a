from __future__ import annotations
import tkinter as tk
from collections.abc import Callable

from ujump.domain.input_state import InputState

_MOVE_KEYS = ("Left", "Right", "Up")


class TkInputMapper:
    def __init__(self, root: tk.Misc, *, on_pause: Callable[[], None] | None = None) -> None:
        self._down: dict[str, bool] = {k: False for k in _MOVE_KEYS}
        self._on_pause = on_pause

        for key in _MOVE_KEYS:
            root.bind(f"<KeyPress-{key}>", self._on_key_down)
            root.bind(f"<KeyRelease-{key}>", self._on_key_up)
        root.bind("<KeyPress-p>", self._on_pause_key)

        # Helps ensure root gets key events.
        root.focus_set()

    def _on_key_down(self, evt: tk.Event) -> None:
        self._down[evt.keysym] = True

    def _on_key_up(self, evt: tk.Event) -> None:
        self._down[evt.keysym] = False

    def _on_pause_key(self, _evt: tk.Event) -> None:
        # Edge-triggered: key repeat delivers more presses, each one toggles.
        if self._on_pause is not None:
            self._on_pause()

    def sample(self) -> InputState:
        # Held-key semantics; the snapshot stays fixed for the whole step.
        return InputState(
            left=self._down["Left"],
            right=self._down["Right"],
            jump=self._down["Up"],
        )
