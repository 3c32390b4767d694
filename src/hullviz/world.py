from esper import World

from hullviz.components.animation_state import AnimationState
from hullviz.components.status_line import StatusLine


def create_world() -> World:
    world = World()

    # Register the scheduler and status resources on a single state entity.
    state_entity = world.create_entity()
    world.add_component(state_entity, AnimationState())
    world.add_component(state_entity, StatusLine())
    return world
