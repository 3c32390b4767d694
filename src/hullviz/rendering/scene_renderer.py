from __future__ import annotations

from typing import Iterable

from hullviz.components.drawable import Color, Drawable
from hullviz.rendering.mapper import CanvasMapper
from hullviz.rendering.surface import RenderSurface


class SceneRenderer:
    """Paints one frame: blank surface, drawing-area border, then every shape in order."""

    def __init__(self, surface: RenderSurface, mapper: CanvasMapper):
        self.surface = surface
        self.mapper = mapper

    def render(self, shapes: Iterable[Drawable]) -> None:
        self.surface.clear_rect(0, 0, *self.mapper.physical_size())
        self._draw_border()
        for shape in shapes:
            draw = getattr(shape, "draw", None)
            if draw is None:
                continue
            draw(self.surface, self.mapper)

    def _draw_border(self) -> None:
        self.surface.set_color(Color.BLACK)
        left, top = self.mapper.to_physical(0, self.mapper.logical_height)
        self.surface.stroke_rect(left, top, *self.mapper.drawing_area_size())
