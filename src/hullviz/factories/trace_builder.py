from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from hullviz.components.drawable import Color, Drawable, Point
from hullviz.components.removal import HandleMatch
from hullviz.components.scene_object import AnimatedEffect, RemovalEffect, SceneObject, StaticDrawable
from hullviz.constants import HIGHLIGHT_FRAMES

PointTuple = Tuple[float, float]


@dataclass
class HullTrace:
    """Animation script for one algorithm run plus the result it replays."""
    objects: List[SceneObject]
    seed: PointTuple
    hull: List[PointTuple] = field(default_factory=list)


def _hold(shape: Drawable):
    def frame(progress: int) -> Optional[Drawable]:
        return shape
    return frame


def _flash(shape: Drawable, duration: int):
    def frame(progress: int) -> Optional[Drawable]:
        return shape if progress < duration else None
    return frame


class TraceBuilder:
    """Accumulates scheduler objects for a trace, handing out handles and stages."""

    def __init__(self, highlight_frames: int = HIGHLIGHT_FRAMES):
        self.highlight_frames = highlight_frames
        self.objects: List[SceneObject] = []
        self._handles = itertools.count()
        self._stages = itertools.count()

    def next_stage(self) -> int:
        return next(self._stages)

    def marker(self, point: PointTuple, color: Color = Color.BLACK) -> int:
        handle = next(self._handles)
        self.objects.append(StaticDrawable(shape=Point(point[0], point[1], color), handle=handle))
        return handle

    def markers(self, points: Iterable[PointTuple]) -> List[int]:
        return [self.marker(point) for point in points]

    def highlight(self, shape: Drawable, stage: int) -> int:
        """Animate ``shape`` for the highlight duration and keep it afterwards."""

        handle = next(self._handles)
        self.objects.append(AnimatedEffect(self.highlight_frames, stage, _hold(shape), handle))
        return handle

    def flash(self, shape: Drawable, stage: int) -> int:
        """Show ``shape`` for the highlight duration, then let it vanish."""

        handle = next(self._handles)
        duration = self.highlight_frames
        self.objects.append(AnimatedEffect(duration, stage, _flash(shape, duration), handle))
        return handle

    def remove(self, handles: Iterable[int], stage: int) -> int:
        handle = next(self._handles)
        self.objects.append(RemovalEffect(0, stage, HandleMatch(frozenset(handles)), handle))
        return handle

    def build(self, seed: PointTuple, hull: Optional[List[PointTuple]] = None) -> HullTrace:
        return HullTrace(objects=list(self.objects), seed=seed, hull=list(hull or []))
