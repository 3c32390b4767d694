"""Geometric primitives that know how to paint themselves onto a render surface."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Tuple, Union

from hullviz.constants import POINT_RADIUS

if TYPE_CHECKING:
    from hullviz.rendering.mapper import CanvasMapper
    from hullviz.rendering.surface import RenderSurface


class Color(str, Enum):
    """Palette used by the traces: black markers, red rejections, blue acceptances."""
    BLACK = "black"
    RED = "red"
    BLUE = "blue"


@dataclass(frozen=True, slots=True)
class Point:
    x: float
    y: float
    color: Color = Color.BLACK

    def draw(self, surface: RenderSurface, mapper: CanvasMapper) -> None:
        surface.set_color(self.color)
        px, py = mapper.to_physical(self.x, self.y)
        surface.fill_circle(px, py, POINT_RADIUS)


@dataclass(frozen=True, slots=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    color: Color = Color.BLACK

    @classmethod
    def between(cls, start: Tuple[float, float], end: Tuple[float, float], color: Color = Color.BLACK) -> "Line":
        return cls(start[0], start[1], end[0], end[1], color)

    @property
    def end(self) -> Tuple[float, float]:
        return (self.x2, self.y2)

    def draw(self, surface: RenderSurface, mapper: CanvasMapper) -> None:
        surface.set_color(self.color)
        start = mapper.to_physical(self.x1, self.y1)
        end = mapper.to_physical(self.x2, self.y2)
        surface.stroke_line(*start, *end)


Drawable = Union[Point, Line]
