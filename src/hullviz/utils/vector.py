from __future__ import annotations

import math
from typing import Tuple

Vec = Tuple[float, float]


def sub(a: Vec, b: Vec) -> Vec:
    return (a[0] - b[0], a[1] - b[1])


def length(v: Vec) -> float:
    return math.hypot(v[0], v[1])


def normalize(v: Vec) -> Vec:
    """Return ``v`` scaled to unit length; the zero vector has no direction."""

    size = length(v)
    if size == 0:
        raise ValueError("Cannot normalize a zero-length vector")
    return (v[0] / size, v[1] / size)


def direction(start: Vec, end: Vec) -> Vec:
    return normalize(sub(end, start))


def dot(a: Vec, b: Vec) -> float:
    return a[0] * b[0] + a[1] * b[1]


def cross(a: Vec, b: Vec) -> float:
    """Z component of the 3D cross product; positive when ``b`` turns left of ``a``."""

    return a[0] * b[1] - a[1] * b[0]


def distance(a: Vec, b: Vec) -> float:
    return length(sub(b, a))
