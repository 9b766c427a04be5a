from __future__ import annotations

import tkinter as tk

from ujump.domain.actors import ActorKind
from ujump.domain.game_state import State
from ujump.domain.level import Level
from ujump.domain.status import Status
from ujump.domain.tiles import TileKind

_TILE_COLORS = {
    TileKind.WALL: "#fff",
    TileKind.LAVA: "#ff6464",
}
_ACTOR_COLORS = {
    ActorKind.PLAYER: "#404040",
    ActorKind.LAVA: "#ff6464",
    ActorKind.COIN: "#f1e559",
}
_STATUS_BACKGROUNDS = {
    Status.PLAYING: "#34a6fb",
    Status.WON: "#34a6fb",
    Status.LOST: "#2c88cf",
}


class TkCanvasView:
    """Draws State snapshots on a scrolling canvas; one cell is `scale` pixels."""

    def __init__(self, root: tk.Misc, *, width: int, height: int, scale: int = 20) -> None:
        self._w = width
        self._h = height
        self._scale = scale
        self._level: Level | None = None

        self.canvas = tk.Canvas(root, width=width, height=height, highlightthickness=0)
        self.canvas.pack(fill="both", expand=True)

    def render(self, state: State) -> None:
        if state.level is not self._level:
            self._draw_grid(state.level)

        s = self._scale
        self.canvas.delete("actor")
        for a in state.actors:
            x1, y1 = a.pos.x * s, a.pos.y * s
            x2, y2 = x1 + a.size.x * s, y1 + a.size.y * s
            self.canvas.create_rectangle(
                x1, y1, x2, y2, outline="", fill=_ACTOR_COLORS[a.kind], tags=("actor",)
            )

        self.canvas.configure(background=_STATUS_BACKGROUNDS[state.status])
        self._draw_hud(state)
        self._scroll_player_into_view(state)

    def show_message(self, text: str) -> None:
        self.canvas.delete("all")
        self._level = None
        self.canvas.create_text(self._w / 2, self._h / 2, text=text, font=("TkDefaultFont", 18))

    def clear(self) -> None:
        self.canvas.delete("all")
        self._level = None

    def _draw_grid(self, level: Level) -> None:
        self.canvas.delete("all")
        self._level = level
        s = self._scale
        self.canvas.configure(scrollregion=(0, 0, level.width * s, level.height * s))

        for y, row in enumerate(level.rows):
            for x, kind in enumerate(row):
                color = _TILE_COLORS.get(kind)
                if color is None:
                    continue
                self.canvas.create_rectangle(
                    x * s, y * s, (x + 1) * s, (y + 1) * s, outline="", fill=color, tags=("tile",)
                )

    def _draw_hud(self, state: State) -> None:
        self.canvas.delete("hud")
        left = self.canvas.canvasx(0)
        top = self.canvas.canvasy(0)
        self.canvas.create_text(
            left + 10, top + 10, anchor="nw", tags=("hud",),
            text=f"{state.status.value}  coins left={state.coins_left}",
            font=("TkDefaultFont", 12),
        )

    def _scroll_player_into_view(self, state: State) -> None:
        level = state.level
        total_w = level.width * self._scale
        total_h = level.height * self._scale
        if total_w <= self._w and total_h <= self._h:
            return

        p = state.player
        cx = (p.pos.x + p.size.x / 2) * self._scale
        cy = (p.pos.y + p.size.y / 2) * self._scale
        margin = self._w / 3

        left = self.canvas.canvasx(0)
        top = self.canvas.canvasy(0)
        if cx < left + margin:
            left = cx - margin
        elif cx > left + self._w - margin:
            left = cx + margin - self._w
        if cy < top + margin:
            top = cy - margin
        elif cy > top + self._h - margin:
            top = cy + margin - self._h

        if total_w > 0:
            self.canvas.xview_moveto(max(0.0, left) / total_w)
        if total_h > 0:
            self.canvas.yview_moveto(max(0.0, top) / total_h)
