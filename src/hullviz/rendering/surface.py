from __future__ import annotations

from typing import Protocol

from hullviz.components.drawable import Color


class RenderSurface(Protocol):
    """Drawing primitives the scene needs. Coordinates are physical, top-left origin."""

    def set_color(self, color: Color) -> None: ...

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None: ...

    def fill_circle(self, cx: float, cy: float, radius: float) -> None: ...

    def stroke_line(self, x1: float, y1: float, x2: float, y2: float) -> None: ...

    def stroke_rect(self, x: float, y: float, width: float, height: float) -> None: ...
