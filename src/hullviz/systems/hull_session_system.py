"""Session context for one visualisation: the current points and the run playing over them."""
from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence

from esper import World

from hullviz.components.drawable import Point
from hullviz.components.status_line import StatusSeverity
from hullviz.events.bus import (EVENT_ALGORITHM_REQUEST, EVENT_ANIMATION_INTERRUPTED,
                                EVENT_POINTS_INPUT, EventBus)
from hullviz.factories.graham_scan import graham_scan_trace
from hullviz.factories.jarvis_march import DegenerateHullError, jarvis_march_trace
from hullviz.factories.trace_builder import HullTrace, PointTuple
from hullviz.systems.drawing_manager import DrawingManager
from hullviz.utils.point_parser import PointInputError, parse_points, validate_points
from hullviz.utils.status import report_status

logger = logging.getLogger(__name__)

TraceGenerator = Callable[[Sequence[PointTuple]], HullTrace]

ALGORITHMS: Dict[str, TraceGenerator] = {
    "jarvis": jarvis_march_trace,
    "graham": graham_scan_trace,
}

ALGORITHM_NAMES = {
    "jarvis": "Jarvis March",
    "graham": "Graham Scan",
}


def _fmt(point: PointTuple) -> str:
    return f"({point[0]:g}, {point[1]:g})"


class HullSessionSystem:
    """Turns point edits and algorithm requests into scheduler runs.

    A new request always interrupts whatever is playing: the scene is cleared
    and nothing from the previous run is kept.
    """

    def __init__(self, world: World, event_bus: EventBus, drawing_manager: DrawingManager):
        self.world = world
        self.event_bus = event_bus
        self.drawing = drawing_manager
        self.points: List[PointTuple] = []
        self.last_trace: Optional[HullTrace] = None
        self._previous_text: Optional[str] = None
        self.event_bus.subscribe(EVENT_POINTS_INPUT, self.on_points_input)
        self.event_bus.subscribe(EVENT_ALGORITHM_REQUEST, self.on_algorithm_request)

    def on_points_input(self, sender, **kwargs):
        text = kwargs.get("text")
        if text is None:
            return
        if text == self._previous_text and not kwargs.get("force"):
            return
        self._previous_text = text
        self._interrupt()
        self.drawing.clear()
        self.last_trace = None
        try:
            points = parse_points(text)
        except PointInputError as exc:
            self.points = []
            report_status(self.event_bus, StatusSeverity.ERROR, str(exc))
            return
        self.points = points
        self.drawing.add(*(Point(x, y) for x, y in points))
        report_status(self.event_bus, StatusSeverity.INFO, f"Parsed {len(points)} points!")

    def on_algorithm_request(self, sender, **kwargs):
        key = kwargs.get("algorithm")
        generator = ALGORITHMS.get(key)
        if generator is None:
            report_status(self.event_bus, StatusSeverity.ERROR, f"Unknown algorithm: {key!r}")
            return
        try:
            validate_points(self.points)
        except PointInputError as exc:
            report_status(self.event_bus, StatusSeverity.ERROR, str(exc))
            return
        self._interrupt()
        self.drawing.clear()
        try:
            trace = generator(self.points)
        except DegenerateHullError as exc:
            self.drawing.add(*(Point(x, y) for x, y in self.points))
            report_status(self.event_bus, StatusSeverity.ERROR, str(exc))
            return
        self.last_trace = trace
        logger.info("Running %s over %d points (%d scene objects)", key, len(self.points), len(trace.objects))
        self.drawing.add(*trace.objects)
        self.drawing.start_animation()
        report_status(
            self.event_bus,
            StatusSeverity.INFO,
            f"{ALGORITHM_NAMES[key]}: starting point found at {_fmt(trace.seed)}",
        )

    def _interrupt(self) -> None:
        if not self.drawing.in_progress:
            return
        stage = self.drawing.state.stage
        logger.info("Interrupting animation at stage %d", stage)
        self.event_bus.emit(EVENT_ANIMATION_INTERRUPTED, stage=stage)
        report_status(self.event_bus, StatusSeverity.ERROR, "Animation interrupted")
