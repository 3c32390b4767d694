from esper import World

from hullviz.components.status_line import StatusLine, StatusSeverity
from hullviz.constants import STATUS_HISTORY_LIMIT
from hullviz.events.bus import EVENT_STATUS, EventBus


class StatusSystem:
    """Keeps the latest status notification (and a short history) for display."""

    def __init__(self, world: World, event_bus: EventBus, history_limit: int = STATUS_HISTORY_LIMIT):
        self.world = world
        self.event_bus = event_bus
        self.history_limit = history_limit
        self.event_bus.subscribe(EVENT_STATUS, self.on_status)

    def on_status(self, sender, **kwargs):
        message = kwargs.get("message")
        if message is None:
            return
        severity = kwargs.get("severity") or StatusSeverity.INFO
        try:
            severity = StatusSeverity(severity)
        except ValueError:
            severity = StatusSeverity.INFO
        line = self.current()
        if line is None:
            line = StatusLine()
            self.world.create_entity(line)
        line.severity = severity
        line.message = str(message)
        line.history.append((severity, line.message))
        overflow = len(line.history) - max(self.history_limit, 0)
        if overflow > 0:
            del line.history[:overflow]

    def current(self) -> StatusLine | None:
        for _, line in self.world.get_component(StatusLine):
            return line
        return None
