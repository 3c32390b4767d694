"""Scheduler objects produced by trace generators and consumed by DrawingManager.add()."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from hullviz.components.animated import FrameFn
from hullviz.components.drawable import Drawable
from hullviz.components.removal import RemovalPredicate


@dataclass(frozen=True, slots=True)
class StaticDrawable:
    shape: Drawable
    handle: int


@dataclass(frozen=True, slots=True)
class AnimatedEffect:
    duration: int
    stage: int
    frame: FrameFn
    handle: int


@dataclass(frozen=True, slots=True)
class RemovalEffect:
    duration: int
    stage: int
    predicate: RemovalPredicate
    handle: int


SceneObject = Union[StaticDrawable, AnimatedEffect, RemovalEffect]
