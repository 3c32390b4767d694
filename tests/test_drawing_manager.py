import pytest

from hullviz.components.drawable import Color, Point
from hullviz.components.removal import HandleMatch, ShapeMatch
from hullviz.components.scene_entry import SceneEntry
from hullviz.components.scene_object import AnimatedEffect, RemovalEffect, StaticDrawable
from hullviz.components.status_line import StatusSeverity
from hullviz.components.timed import Timed
from hullviz.events.bus import EVENT_ANIMATION_COMPLETE, EVENT_ANIMATION_START, EVENT_STATUS, EVENT_TICK

from tests.helpers import make_manager, run_to_completion


def hold(shape):
    return lambda frame: shape


def timed_by_handle(world):
    result = {}
    for ent, (entry, timed) in world.get_components(SceneEntry, Timed):
        result[entry.handle] = timed
    return result


def test_step_is_noop_until_started():
    _bus, world, manager = make_manager()
    manager.add(AnimatedEffect(3, 0, hold(Point(1, 1)), handle=1))
    manager.step()
    manager.step()
    assert timed_by_handle(world)[1].progress == -1
    assert manager.visible_shapes() == []


def test_step_and_draw_safe_on_empty_scheduler():
    _bus, _world, manager = make_manager()
    manager.step()
    manager.draw()
    manager.start_animation()
    manager.step()
    assert not manager.in_progress


def test_zero_duration_animation_freezes_to_first_frame():
    _bus, world, manager = make_manager()
    manager.add(AnimatedEffect(0, 0, lambda frame: Point(frame, 7, Color.BLUE), handle=1))
    manager.start_animation()
    manager.step()
    assert manager.visible_shapes() == [Point(0, 7, Color.BLUE)]
    assert timed_by_handle(world) == {}
    assert not manager.in_progress


def test_animation_shows_current_frame_then_freezes():
    _bus, world, manager = make_manager()
    manager.add(AnimatedEffect(2, 0, lambda frame: Point(frame, 0), handle=1))
    manager.start_animation()
    assert manager.visible_shapes() == []
    manager.step()
    assert manager.visible_shapes() == [Point(0, 0)]
    manager.step()
    assert manager.visible_shapes() == [Point(1, 0)]
    assert manager.in_progress
    manager.step()
    assert manager.visible_shapes() == [Point(2, 0)]
    assert not manager.in_progress


def test_flash_that_ends_empty_is_dropped():
    _bus, world, manager = make_manager()
    manager.add(AnimatedEffect(1, 0, lambda frame: Point(3, 3, Color.RED) if frame < 1 else None, handle=1))
    manager.start_animation()
    manager.step()
    assert manager.visible_shapes() == [Point(3, 3, Color.RED)]
    manager.step()
    assert manager.visible_shapes() == []
    assert world.get_component(SceneEntry) == []


def test_zero_duration_removal_fires_when_stage_reached():
    _bus, world, manager = make_manager()
    manager.add(
        StaticDrawable(Point(1, 1), handle=1),
        StaticDrawable(Point(2, 2), handle=2),
        RemovalEffect(0, 0, HandleMatch(frozenset({1})), handle=3),
    )
    manager.start_animation()
    manager.step()
    assert manager.visible_shapes() == [Point(2, 2)]
    handles = sorted(entry.handle for _, entry in world.get_component(SceneEntry))
    assert handles == [2]
    assert not manager.in_progress


def test_removal_waits_for_earlier_stage_to_finish():
    _bus, _world, manager = make_manager()
    manager.add(
        StaticDrawable(Point(1, 1), handle=1),
        AnimatedEffect(2, 0, hold(Point(9, 9, Color.BLUE)), handle=2),
        RemovalEffect(0, 1, HandleMatch(frozenset({1})), handle=3),
    )
    manager.start_animation()
    for _ in range(3):
        manager.step()
    assert Point(1, 1) in manager.visible_shapes()
    assert manager.state.stage == 1
    manager.step()
    assert manager.visible_shapes() == [Point(9, 9, Color.BLUE)]
    assert not manager.in_progress


def test_removal_matching_nothing_is_harmless():
    _bus, _world, manager = make_manager()
    manager.add(StaticDrawable(Point(1, 1), handle=1), RemovalEffect(0, 0, HandleMatch(frozenset({99})), handle=2))
    manager.start_animation()
    manager.step()
    assert manager.visible_shapes() == [Point(1, 1)]


def test_shape_match_removes_by_fields_not_identity():
    _bus, _world, manager = make_manager()
    manager.add(
        Point(1, 1),
        Point(1, 1, Color.BLUE),
        Point(1, 1),
        RemovalEffect(0, 0, ShapeMatch(Point(1, 1)), handle=10),
    )
    manager.start_animation()
    manager.step()
    assert manager.visible_shapes() == [Point(1, 1, Color.BLUE)]


def test_later_stage_is_inert_while_earlier_stage_runs():
    _bus, world, manager = make_manager()
    manager.add(
        AnimatedEffect(3, 0, hold(Point(0, 0)), handle=1),
        AnimatedEffect(1, 0, hold(Point(1, 0)), handle=2),
        AnimatedEffect(1, 1, hold(Point(2, 0)), handle=3),
    )
    manager.start_animation()
    for _ in range(3):
        manager.step()
        assert timed_by_handle(world)[3].progress == -1
    manager.step()
    # Stage 0 finished on this tick; stage 1 starts on the next.
    assert timed_by_handle(world)[3].progress == -1
    assert manager.state.stage == 1
    manager.step()
    assert timed_by_handle(world)[3].progress == 0


def test_cursor_skips_empty_stages():
    _bus, world, manager = make_manager()
    manager.add(AnimatedEffect(0, 5, hold(Point(0, 0)), handle=1))
    manager.start_animation()
    manager.step()
    assert manager.state.stage == 5
    manager.step()
    assert manager.visible_shapes() == [Point(0, 0)]
    assert not manager.in_progress


def test_frozen_animation_keeps_its_draw_position():
    _bus, _world, manager = make_manager()
    manager.add(
        Point(0, 0),
        AnimatedEffect(0, 0, hold(Point(1, 1, Color.BLUE)), handle=1),
        Point(2, 2),
    )
    manager.start_animation()
    manager.step()
    assert manager.visible_shapes() == [Point(0, 0), Point(1, 1, Color.BLUE), Point(2, 2)]


def test_completion_emits_events_once():
    bus, _world, manager = make_manager()
    completed = []
    statuses = []
    bus.subscribe(EVENT_ANIMATION_COMPLETE, lambda sender, **k: completed.append(k))
    bus.subscribe(EVENT_STATUS, lambda sender, **k: statuses.append(k))
    manager.add(AnimatedEffect(2, 0, hold(Point(0, 0)), handle=1))
    manager.start_animation()
    ticks = run_to_completion(manager)
    manager.step()
    manager.step()
    assert ticks == 3
    assert len(completed) == 1
    assert statuses == [{"severity": StatusSeverity.SUCCESS, "message": "Animation complete!"}]


def test_tick_event_drives_step():
    bus, world, manager = make_manager()
    started = []
    bus.subscribe(EVENT_ANIMATION_START, lambda sender, **k: started.append(k))
    manager.add(AnimatedEffect(5, 0, hold(Point(0, 0)), handle=1))
    manager.start_animation()
    bus.emit(EVENT_TICK, dt=1 / 60)
    bus.emit(EVENT_TICK, dt=1 / 60)
    assert timed_by_handle(world)[1].progress == 1
    assert started == [{"objects": 1}]


def test_clear_resets_everything_and_is_idempotent():
    _bus, world, manager = make_manager()
    manager.add(Point(0, 0), AnimatedEffect(5, 2, hold(Point(1, 1)), handle=1))
    manager.start_animation()
    manager.step()
    manager.clear()
    manager.clear()
    assert world.get_component(SceneEntry) == []
    assert manager.state.stage == 0
    assert not manager.in_progress
    manager.step()
    assert manager.visible_shapes() == []


def test_add_ignores_none_and_rejects_unknown_objects():
    _bus, _world, manager = make_manager()
    manager.add(None, Point(1, 1))
    assert manager.visible_shapes() == [Point(1, 1)]
    with pytest.raises(TypeError):
        manager.add("not a scene object")


def test_draw_passes_shapes_in_order_to_renderer():
    class Renderer:
        def __init__(self):
            self.frames = []

        def render(self, shapes):
            self.frames.append(list(shapes))

    renderer = Renderer()
    _bus, _world, manager = make_manager(renderer)
    manager.add(Point(0, 0), Point(5, 5, Color.RED))
    manager.draw()
    assert renderer.frames == [[Point(0, 0), Point(5, 5, Color.RED)]]


def test_shape_match_skips_running_animations():
    _bus, _world, manager = make_manager()
    manager.add(
        AnimatedEffect(10, 0, hold(Point(1, 1)), handle=1),
        RemovalEffect(0, 0, ShapeMatch(Point(1, 1)), handle=2),
    )
    manager.start_animation()
    manager.step()
    assert manager.visible_shapes() == [Point(1, 1)]
    assert manager.in_progress


def test_bare_shape_handles_are_per_manager():
    _bus_a, world_a, manager_a = make_manager()
    _bus_b, world_b, manager_b = make_manager()
    manager_a.add(Point(0, 0), Point(1, 1))
    manager_b.add(Point(2, 2))
    assert sorted(entry.handle for _, entry in world_a.get_component(SceneEntry)) == [-2, -1]
    assert [entry.handle for _, entry in world_b.get_component(SceneEntry)] == [-1]
