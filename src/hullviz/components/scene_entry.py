from dataclasses import dataclass

from hullviz.components.drawable import Drawable


@dataclass(slots=True)
class SceneEntry:
    """Marks an entity as part of the scene; ``order`` is its draw position."""
    handle: int
    order: int


@dataclass(slots=True)
class Renderable:
    shape: Drawable
