"""Gift wrapping (Jarvis March) trace generator.

Starting from the leftmost-then-lowest point, each round sweeps every other
point and keeps the candidate that makes the smallest left turn relative to
the direction we arrived from. Accepted candidates are drawn as blue edges
(the previous best edge is removed when superseded); rejected ones flash red.
The round's winner is then marked blue and the wrap moves on to it.
"""
from __future__ import annotations

import logging
import math
from typing import List, Sequence

from hullviz.components.drawable import Color, Line, Point
from hullviz.factories.seed_selection import leftmost_then_lowest, trace_seed_selection
from hullviz.factories.trace_builder import HullTrace, PointTuple, TraceBuilder
from hullviz.utils.vector import cross, direction, distance, dot

logger = logging.getLogger(__name__)

# Dot products this close are treated as the same heading.
HEADING_TOLERANCE = 1e-12


class DegenerateHullError(ValueError):
    """Raised when the wrap cannot make progress, e.g. on collinear input."""


def jarvis_march_trace(points: Sequence[PointTuple], builder: TraceBuilder | None = None) -> HullTrace:
    builder = builder or TraceBuilder()
    points = [(float(x), float(y)) for x, y in points]
    markers = builder.markers(points)
    removed_markers = set()

    seed_index = trace_seed_selection(builder, points, markers, leftmost_then_lowest)
    seed = points[seed_index]
    removed_markers.add(seed_index)

    hull: List[PointTuple] = [seed]
    current = seed
    # Arriving straight down into the seed, as if from a point directly above it.
    heading = (0.0, -1.0)
    for _ in range(len(points)):
        winner = _wrap_round(builder, points, current, heading)
        # The seed already carries its blue highlight from the seed scan.
        if points[winner] != seed:
            stage = builder.next_stage()
            builder.highlight(Point(points[winner][0], points[winner][1], Color.BLUE), stage)
            if winner not in removed_markers:
                builder.remove([markers[winner]], stage)
                removed_markers.add(winner)
        heading = direction(current, points[winner])
        current = points[winner]
        hull.append(current)
        if current == seed:
            logger.debug("Jarvis March closed a hull of %d vertices in %d objects", len(hull) - 1, len(builder.objects))
            return builder.build(seed, hull)
    raise DegenerateHullError("Gift wrapping did not return to the starting point")


def _wrap_round(builder: TraceBuilder, points: List[PointTuple], current: PointTuple, heading) -> int:
    """Sweep every candidate from ``current`` and return the index of the winner."""

    best_index: int | None = None
    best_dot = -math.inf
    best_distance = 0.0
    best_edge: int | None = None
    for index, candidate in enumerate(points):
        if candidate == current:
            continue
        stage = builder.next_stage()
        heading_to = direction(current, candidate)
        turn = cross(heading, heading_to)
        straightness = dot(heading, heading_to)
        reach = distance(current, candidate)
        accepted = False
        if turn > 0:
            if best_index is not None and math.isclose(straightness, best_dot, rel_tol=0.0, abs_tol=HEADING_TOLERANCE):
                accepted = reach > best_distance
            else:
                accepted = straightness > best_dot
        if accepted:
            edge = builder.highlight(Line.between(current, candidate, Color.BLUE), stage)
            if best_edge is not None:
                builder.remove([best_edge], stage)
            best_index, best_dot, best_distance, best_edge = index, straightness, reach, edge
        else:
            builder.flash(Line.between(current, candidate, Color.RED), stage)
    if best_index is None:
        raise DegenerateHullError(f"No left turn available from {current}; points may be collinear")
    return best_index
