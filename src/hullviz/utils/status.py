from __future__ import annotations

from hullviz.components.status_line import StatusSeverity
from hullviz.events.bus import EVENT_STATUS, EventBus


def report_status(event_bus: EventBus, severity: StatusSeverity, message: str) -> None:
    """Send a one-shot status notification to whoever displays it."""

    event_bus.emit(EVENT_STATUS, severity=severity, message=message)
