"""Stage-synchronised animation scheduler.

Every scheduler object lives in the esper world as an entity carrying a
``SceneEntry`` (identity handle and draw order). Static shapes add a
``Renderable``; animations add ``Timed`` + ``Animated``; cleanups add
``Timed`` + ``Removal``. Each tick only Timed entities tagged with the current
stage advance; the stage cursor then jumps to the lowest stage still pending.
"""
from __future__ import annotations

import itertools
import logging
from typing import TYPE_CHECKING, List, Optional, Tuple

from esper import World

from hullviz.components.animated import Animated
from hullviz.components.animation_state import AnimationState
from hullviz.components.drawable import Drawable, Line, Point
from hullviz.components.removal import Removal, RemovalPredicate
from hullviz.components.scene_entry import Renderable, SceneEntry
from hullviz.components.scene_object import AnimatedEffect, RemovalEffect, SceneObject, StaticDrawable
from hullviz.components.status_line import StatusSeverity
from hullviz.components.timed import Timed
from hullviz.events.bus import (EVENT_ANIMATION_COMPLETE, EVENT_ANIMATION_START,
                                EVENT_TICK, EventBus)
from hullviz.utils.status import report_status

if TYPE_CHECKING:
    from hullviz.rendering.scene_renderer import SceneRenderer

logger = logging.getLogger(__name__)


class DrawingManager:
    """Owns the scene entities and drives one stage-synchronised tick per frame."""

    def __init__(self, world: World, event_bus: EventBus, renderer: Optional[SceneRenderer] = None):
        self.world = world
        self.event_bus = event_bus
        self.renderer = renderer
        self._order = itertools.count()
        # Handles for bare shapes passed to add(); kept clear of generator-allocated handles.
        self._loose_handles = itertools.count(-1, -1)
        event_bus.subscribe(EVENT_TICK, self.on_tick)

    @property
    def state(self) -> AnimationState:
        for _, state in self.world.get_component(AnimationState):
            return state
        state = AnimationState()
        self.world.create_entity(state)
        return state

    @property
    def in_progress(self) -> bool:
        return self.state.in_progress

    def on_tick(self, sender, **kwargs):
        self.step()

    def clear(self) -> None:
        for ent, _ in list(self.world.get_component(SceneEntry)):
            self.world.delete_entity(ent, immediate=True)
        state = self.state
        state.stage = 0
        state.in_progress = False

    def add(self, *objects: SceneObject | Drawable | None) -> None:
        for obj in objects:
            self._spawn(obj)

    def _spawn(self, obj: SceneObject | Drawable | None) -> None:
        match obj:
            case StaticDrawable(shape=shape, handle=handle):
                self.world.create_entity(self._entry(handle), Renderable(shape))
            case AnimatedEffect(duration=duration, stage=stage, frame=frame, handle=handle):
                self.world.create_entity(self._entry(handle), Timed(duration, stage), Animated(frame))
            case RemovalEffect(duration=duration, stage=stage, predicate=predicate, handle=handle):
                self.world.create_entity(self._entry(handle), Timed(duration, stage), Removal(predicate))
            case Point() | Line():
                self.world.create_entity(self._entry(next(self._loose_handles)), Renderable(obj))
            case None:
                # Placeholder with nothing to draw or schedule.
                pass
            case _:
                raise TypeError(f"Unsupported scene object: {obj!r}")

    def _entry(self, handle: int) -> SceneEntry:
        return SceneEntry(handle=handle, order=next(self._order))

    def start_animation(self) -> None:
        state = self.state
        state.stage = 0
        state.in_progress = True
        logger.debug("Animation started with %d scene entities", len(self.world.get_component(SceneEntry)))
        self.event_bus.emit(EVENT_ANIMATION_START, objects=len(self.world.get_component(SceneEntry)))

    def step(self) -> None:
        state = self.state
        if not state.in_progress:
            return
        fired: List[RemovalPredicate] = []
        for ent, (entry, timed) in self._ordered(Timed):
            if timed.stage == state.stage:
                timed.advance()
            if not timed.is_done:
                continue
            animated = self.world.try_component(ent, Animated)
            if animated is not None:
                self._freeze(ent, animated, timed)
                continue
            removal = self.world.try_component(ent, Removal)
            if removal is not None:
                fired.append(removal.predicate)
                self.world.delete_entity(ent, immediate=True)
        if fired:
            self._apply_removals(fired)

        pending = [timed.stage for _, timed in self.world.get_component(Timed)]
        if pending:
            state.stage = min(pending)
            return
        state.in_progress = False
        logger.debug("Animation complete")
        self.event_bus.emit(EVENT_ANIMATION_COMPLETE)
        report_status(self.event_bus, StatusSeverity.SUCCESS, "Animation complete!")

    def _freeze(self, ent: int, animated: Animated, timed: Timed) -> None:
        """Replace a finished animation with its last frame, or drop it if that frame is empty."""

        shape = animated.representation(timed)
        if shape is None:
            self.world.delete_entity(ent, immediate=True)
            return
        self.world.remove_component(ent, Animated)
        self.world.remove_component(ent, Timed)
        self.world.add_component(ent, Renderable(shape))

    def _apply_removals(self, predicates: List[RemovalPredicate]) -> None:
        for ent, entry in list(self.world.get_component(SceneEntry)):
            # Running animations are not matched by what they happen to show this frame.
            shape = None if self.world.has_component(ent, Timed) else self._current_shape(ent)
            if any(predicate(entry.handle, shape) for predicate in predicates):
                self.world.delete_entity(ent, immediate=True)

    def _current_shape(self, ent: int) -> Optional[Drawable]:
        renderable = self.world.try_component(ent, Renderable)
        if renderable is not None:
            return renderable.shape
        animated = self.world.try_component(ent, Animated)
        timed = self.world.try_component(ent, Timed)
        if animated is not None and timed is not None:
            return animated.representation(timed)
        return None

    def _ordered(self, component_type) -> List[Tuple[int, Tuple[SceneEntry, object]]]:
        rows = [(ent, (entry, comp)) for ent, (entry, comp) in self.world.get_components(SceneEntry, component_type)]
        rows.sort(key=lambda row: row[1][0].order)
        return rows

    def visible_shapes(self) -> List[Drawable]:
        """Shapes to paint this frame, earliest-added first so later ones paint over."""

        shapes: List[Tuple[int, Drawable]] = []
        for ent, entry in self.world.get_component(SceneEntry):
            shape = self._current_shape(ent)
            if shape is not None:
                shapes.append((entry.order, shape))
        shapes.sort(key=lambda item: item[0])
        return [shape for _, shape in shapes]

    def draw(self) -> None:
        if self.renderer is None:
            return
        self.renderer.render(self.visible_shapes())
