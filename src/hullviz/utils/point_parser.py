"""Parsing and validation of the user's point list text.

Input looks like ``(10, 20), (30.5, 40), ...``. Parentheses are rewritten to
JSON arrays so the whole list can be decoded in one go.
"""
from __future__ import annotations

import json
from typing import Any, List, Sequence, Tuple

from hullviz.constants import LOGICAL_HEIGHT, LOGICAL_WIDTH, MIN_POINTS
from hullviz.utils.vector import cross, sub

PointTuple = Tuple[float, float]


class PointInputError(ValueError):
    """Raised when point text cannot be used as input for a hull algorithm."""


def parse_points(text: str) -> List[PointTuple]:
    normalized = text.replace("(", "[").replace(")", "]")
    try:
        raw = json.loads(f"[{normalized}]")
    except json.JSONDecodeError as exc:
        raise PointInputError(f"Couldn't parse points: {exc.msg} (column {exc.colno})") from exc
    return [_coerce_point(item, index) for index, item in enumerate(raw)]


def _coerce_point(item: Any, index: int) -> PointTuple:
    if not isinstance(item, list) or len(item) != 2:
        raise PointInputError(f"Point #{index + 1} must be a pair (x, y), got {item!r}")
    coords = []
    for value in item:
        # bool is an int subclass but never a coordinate
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise PointInputError(f"Point #{index + 1} has a non-numeric coordinate: {value!r}")
        coords.append(float(value))
    return (coords[0], coords[1])


def validate_points(
    points: Sequence[PointTuple],
    *,
    min_points: int = MIN_POINTS,
    width: float = LOGICAL_WIDTH,
    height: float = LOGICAL_HEIGHT,
) -> None:
    """Reject point sets a hull trace cannot be generated for."""

    if len(points) < min_points:
        raise PointInputError(f"Need at least {min_points} points, got {len(points)}")
    for x, y in points:
        if not (0 <= x <= width and 0 <= y <= height):
            raise PointInputError(f"Point ({x:g}, {y:g}) lies outside the {width:g}x{height:g} drawing area")
    if all_collinear(points):
        raise PointInputError("All points are collinear; there is no hull to wrap")


def all_collinear(points: Sequence[PointTuple]) -> bool:
    distinct = list(dict.fromkeys(points))
    if len(distinct) < 3:
        return True
    origin = distinct[0]
    anchor = sub(distinct[1], origin)
    return all(cross(anchor, sub(p, origin)) == 0 for p in distinct[2:])
