from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple


class StatusSeverity(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class StatusLine:
    """Singleton component with the message currently shown to the user."""
    severity: StatusSeverity = StatusSeverity.INFO
    message: str = ""
    history: List[Tuple[StatusSeverity, str]] = field(default_factory=list)
