from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float


# ============================================================================
# INPUT
# ============================================================================
EVENT_POINTS_INPUT = "points_input"                # payload: text=str, force=bool
EVENT_ALGORITHM_REQUEST = "algorithm_request"      # payload: algorithm=str


# ============================================================================
# ANIMATION
# ============================================================================
EVENT_ANIMATION_START = "animation_start"              # payload: objects=int
EVENT_ANIMATION_COMPLETE = "animation_complete"        # payload: None
EVENT_ANIMATION_INTERRUPTED = "animation_interrupted"  # payload: stage=int


# ============================================================================
# STATUS
# ============================================================================
EVENT_STATUS = "status"                            # payload: severity=StatusSeverity, message=str
