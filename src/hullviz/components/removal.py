from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, FrozenSet, Optional

from hullviz.components.drawable import Drawable

# Called with the handle and current shape (None while still animating) of every scene entry.
RemovalPredicate = Callable[[int, Optional[Drawable]], bool]


@dataclass(slots=True)
class Removal:
    """Pending cleanup; fires once when its Timed completes."""
    predicate: RemovalPredicate


@dataclass(frozen=True, slots=True)
class HandleMatch:
    """Matches scene entries by the handle they were created with."""

    handles: FrozenSet[int]

    def __call__(self, handle: int, shape: Optional[Drawable]) -> bool:
        return handle in self.handles


@dataclass(frozen=True, slots=True)
class ShapeMatch:
    """Matches scene entries whose current shape equals ``shape`` field for field."""

    shape: Drawable

    def __call__(self, handle: int, shape: Optional[Drawable]) -> bool:
        return shape is not None and shape == self.shape
