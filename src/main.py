"""Entry point for the convex hull visualizer.

Sets up ECS world, event bus, systems, and Arcade window.

Run with: ``python src/main.py "(10, 20), (300, 50), (120, 340)"``. Keys: J runs
Jarvis March, G runs the Graham Scan start-point search, R reloads the points.
"""
import logging
import sys

from arcade import Window, key, run, set_background_color, color, draw_text
from hullviz.constants import (DEFAULT_POINTS_TEXT, FRAME_PERIOD, STATUS_BAR_HEIGHT,
                               WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH)
from hullviz.components.status_line import StatusSeverity
from hullviz.events.bus import EVENT_ALGORITHM_REQUEST, EVENT_POINTS_INPUT, EVENT_TICK, EventBus
from hullviz.rendering.arcade_surface import ArcadeSurface
from hullviz.rendering.mapper import CanvasMapper
from hullviz.rendering.scene_renderer import SceneRenderer
from hullviz.systems.drawing_manager import DrawingManager
from hullviz.systems.hull_session_system import HullSessionSystem
from hullviz.systems.status_system import StatusSystem
from hullviz.world import create_world

STATUS_COLORS = {
    StatusSeverity.INFO: color.DARK_SLATE_GRAY,
    StatusSeverity.SUCCESS: color.DARK_GREEN,
    StatusSeverity.ERROR: color.DARK_RED,
}

ALGORITHM_KEYS = {
    key.J: "jarvis",
    key.G: "graham",
}


class HullvizWindow(Window):
    def __init__(self, points_text: str):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(FRAME_PERIOD)
        self.points_text = points_text
        self.event_bus = EventBus()
        self.world = create_world()

        # Rendering
        self.mapper = CanvasMapper(self, reserved_bottom=STATUS_BAR_HEIGHT)
        self.renderer = SceneRenderer(ArcadeSurface(self), self.mapper)

        # Scheduler and session systems
        self.status_system = StatusSystem(self.world, self.event_bus)
        self.drawing = DrawingManager(self.world, self.event_bus, self.renderer)
        self.session_system = HullSessionSystem(self.world, self.event_bus, self.drawing)

        set_background_color(color.WHITE)
        self.event_bus.emit(EVENT_POINTS_INPUT, text=self.points_text)

    def on_draw(self):
        self.clear()
        self.drawing.draw()
        line = self.status_system.current()
        if line and line.message:
            draw_text(line.message, 10, 8, STATUS_COLORS.get(line.severity, color.BLACK), 13)

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_key_press(self, symbol: int, modifiers: int):
        algorithm = ALGORITHM_KEYS.get(symbol)
        if algorithm is not None:
            self.event_bus.emit(EVENT_ALGORITHM_REQUEST, algorithm=algorithm)
        elif symbol == key.R:
            self.event_bus.emit(EVENT_POINTS_INPUT, text=self.points_text, force=True)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    points_text = " ".join(sys.argv[1:]) or DEFAULT_POINTS_TEXT
    window = HullvizWindow(points_text)
    run()

if __name__ == "__main__":
    main()
