"""Graham Scan trace generator.

Only the start-vertex search is traced: the bottom-most, then left-most point
is located with the same running-minimum animation Jarvis March uses. The
angular sort and the stack-based scan are not implemented.
"""
from __future__ import annotations

from typing import Sequence

from hullviz.factories.seed_selection import lowest_then_leftmost, trace_seed_selection
from hullviz.factories.trace_builder import HullTrace, PointTuple, TraceBuilder


def graham_scan_trace(points: Sequence[PointTuple], builder: TraceBuilder | None = None) -> HullTrace:
    builder = builder or TraceBuilder()
    points = [(float(x), float(y)) for x, y in points]
    markers = builder.markers(points)
    seed_index = trace_seed_selection(builder, points, markers, lowest_then_leftmost)
    seed = points[seed_index]
    return builder.build(seed, [seed])
