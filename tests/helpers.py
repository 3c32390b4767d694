from __future__ import annotations

from typing import Any, List, Tuple

from hullviz.components.drawable import Color, Line, Point
from hullviz.events.bus import EventBus
from hullviz.systems.drawing_manager import DrawingManager
from hullviz.world import create_world


class DummyWindow:
    def __init__(self, width=600, height=400):
        self.width = width
        self.height = height


class RecordingSurface:
    """RenderSurface double that records every call in order."""

    def __init__(self):
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []

    def set_color(self, color):
        self.calls.append(("set_color", (color,)))

    def clear_rect(self, x, y, width, height):
        self.calls.append(("clear_rect", (x, y, width, height)))

    def fill_circle(self, cx, cy, radius):
        self.calls.append(("fill_circle", (cx, cy, radius)))

    def stroke_line(self, x1, y1, x2, y2):
        self.calls.append(("stroke_line", (x1, y1, x2, y2)))

    def stroke_rect(self, x, y, width, height):
        self.calls.append(("stroke_rect", (x, y, width, height)))


def make_manager(renderer=None):
    bus = EventBus()
    world = create_world()
    manager = DrawingManager(world, bus, renderer)
    return bus, world, manager


def run_to_completion(manager: DrawingManager, max_ticks: int = 20000) -> int:
    """Step until the run finishes; returns the number of ticks it took."""

    ticks = 0
    while manager.in_progress:
        manager.step()
        ticks += 1
        assert ticks <= max_ticks, "animation never completed"
    return ticks


def points_of(shapes, color: Color):
    return [(s.x, s.y) for s in shapes if isinstance(s, Point) and s.color == color]


def lines_of(shapes, color: Color):
    return [((s.x1, s.y1), (s.x2, s.y2)) for s in shapes if isinstance(s, Line) and s.color == color]
