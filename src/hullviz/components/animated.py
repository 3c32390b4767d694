from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from hullviz.components.drawable import Drawable
from hullviz.components.timed import Timed

# Pure function from elapsed frames to what should be on screen (or nothing).
FrameFn = Callable[[int], Optional[Drawable]]


@dataclass(slots=True)
class Animated:
    frame: FrameFn

    def representation(self, timed: Timed) -> Optional[Drawable]:
        if not timed.has_started:
            return None
        return self.frame(timed.progress)
