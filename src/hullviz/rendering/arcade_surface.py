"""RenderSurface backed by arcade's immediate-mode draw calls."""
from __future__ import annotations

import arcade

from hullviz.components.drawable import Color

PALETTE = {
    Color.BLACK: arcade.color.BLACK,
    Color.RED: arcade.color.RED,
    Color.BLUE: arcade.color.BLUE,
}
BACKGROUND_COLOR = arcade.color.WHITE
LINE_WIDTH = 2


class ArcadeSurface:
    """Translates top-left-origin surface calls into arcade's bottom-left space."""

    def __init__(self, window):
        self.window = window
        self._color = PALETTE[Color.BLACK]

    def _flip(self, y: float) -> float:
        return self.window.height - y

    def set_color(self, color: Color) -> None:
        self._color = PALETTE.get(color, arcade.color.BLACK)

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        arcade.draw_lbwh_rectangle_filled(x, self._flip(y) - height, width, height, BACKGROUND_COLOR)

    def fill_circle(self, cx: float, cy: float, radius: float) -> None:
        arcade.draw_circle_filled(cx, self._flip(cy), radius, self._color)

    def stroke_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        arcade.draw_line(x1, self._flip(y1), x2, self._flip(y2), self._color, LINE_WIDTH)

    def stroke_rect(self, x: float, y: float, width: float, height: float) -> None:
        arcade.draw_lbwh_rectangle_outline(x, self._flip(y) - height, width, height, self._color, border_width=1)
