"""Scheduler state resource: the stage wavefront and whether a run is playing."""
from dataclasses import dataclass


@dataclass
class AnimationState:
    """Singleton component owned by the DrawingManager."""
    stage: int = 0
    in_progress: bool = False
