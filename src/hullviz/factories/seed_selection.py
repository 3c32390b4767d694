from __future__ import annotations

from typing import Callable, List, Sequence, Tuple

from hullviz.components.drawable import Color, Point
from hullviz.factories.trace_builder import PointTuple, TraceBuilder

SeedKey = Callable[[PointTuple], Tuple[float, float]]


def leftmost_then_lowest(point: PointTuple) -> Tuple[float, float]:
    return (point[0], point[1])


def lowest_then_leftmost(point: PointTuple) -> Tuple[float, float]:
    return (point[1], point[0])


def trace_seed_selection(
    builder: TraceBuilder,
    points: Sequence[PointTuple],
    marker_handles: List[int],
    key: SeedKey,
) -> int:
    """Emit the running-minimum scan and return the index of the seed point.

    Each examined point gets its own stage. A new running minimum is
    highlighted blue and replaces the previous highlight; any other point
    flashes red. The seed's black marker is removed once the scan ends.
    """

    best_index: int | None = None
    best_highlight: int | None = None
    for index, point in enumerate(points):
        stage = builder.next_stage()
        marker = Point(point[0], point[1])
        if best_index is None or key(point) < key(points[best_index]):
            highlight = builder.highlight(Point(marker.x, marker.y, Color.BLUE), stage)
            if best_highlight is not None:
                builder.remove([best_highlight], stage)
            best_index, best_highlight = index, highlight
        else:
            builder.flash(Point(marker.x, marker.y, Color.RED), stage)
    if best_index is None:
        raise ValueError("Cannot select a seed from an empty point set")
    builder.remove([marker_handles[best_index]], builder.next_stage())
    return best_index
