"""Security event models.

Every event shares the same base fields and adds exactly one type-specific
field group. Events serialize to flat ECS-style documents with dotted keys.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, ClassVar, Dict, Literal, Union

EventType = Literal["authentication", "process", "malware"]
Outcome = Literal["success", "failure"]

EVENT_TYPES = ("authentication", "process", "malware")
MIN_SEVERITY = 1
MAX_SEVERITY = 5


def format_timestamp(timestamp: datetime) -> str:
    """Format a datetime as ISO-8601 UTC with millisecond precision and a Z suffix."""
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    utc = timestamp.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class BaseEvent:
    """
    Fields common to every generated event.

    Attributes:
        timestamp: When the event happened (timezone-aware)
        host: Host name the event was observed on
        user: User name associated with the event
        source_ip: Source IP address
    """

    event_type: ClassVar[str] = ""
    action: ClassVar[str] = ""

    timestamp: datetime
    host: str
    user: str
    source_ip: str

    def __post_init__(self) -> None:
        """Validate common fields."""
        if self.timestamp.tzinfo is None:
            raise ValueError("Event timestamp must be timezone-aware")
        if not self.host:
            raise ValueError("Event host cannot be empty")
        if not self.user:
            raise ValueError("Event user cannot be empty")
        if not self.source_ip:
            raise ValueError("Event source IP cannot be empty")

    def to_document(self) -> Dict[str, Any]:
        """Convert the event to an Elasticsearch document."""
        document: Dict[str, Any] = {
            "@timestamp": format_timestamp(self.timestamp),
            "host.name": self.host,
            "user.name": self.user,
            "source.ip": self.source_ip,
            "event.type": self.event_type,
            "event.action": self.action,
        }
        document.update(self._specific_fields())
        return document

    def _specific_fields(self) -> Dict[str, Any]:
        return {}


@dataclass(frozen=True)
class AuthenticationEvent(BaseEvent):
    """Login attempt with its outcome."""

    event_type: ClassVar[str] = "authentication"
    action: ClassVar[str] = "login"

    outcome: Outcome = "success"

    def __post_init__(self) -> None:
        """Validate authentication outcome."""
        super().__post_init__()
        if self.outcome not in ("success", "failure"):
            raise ValueError(f"Invalid outcome: {self.outcome}. Must be success or failure")

    def _specific_fields(self) -> Dict[str, Any]:
        return {"event.outcome": self.outcome}


@dataclass(frozen=True)
class ProcessEvent(BaseEvent):
    """Process start."""

    event_type: ClassVar[str] = "process"
    action: ClassVar[str] = "start"

    process_name: str = ""

    def __post_init__(self) -> None:
        """Validate process name."""
        super().__post_init__()
        if not self.process_name:
            raise ValueError("Process name cannot be empty")

    def _specific_fields(self) -> Dict[str, Any]:
        return {"process.name": self.process_name}


@dataclass(frozen=True)
class MalwareEvent(BaseEvent):
    """Malware detection with a 1-5 severity."""

    event_type: ClassVar[str] = "malware"
    action: ClassVar[str] = "detected"

    malware_name: str = ""
    severity: int = MIN_SEVERITY

    def __post_init__(self) -> None:
        """Validate malware name and severity range."""
        super().__post_init__()
        if not self.malware_name:
            raise ValueError("Malware name cannot be empty")
        if isinstance(self.severity, bool) or not isinstance(self.severity, int):
            raise ValueError(f"Severity must be an integer, got {self.severity!r}")
        if not MIN_SEVERITY <= self.severity <= MAX_SEVERITY:
            raise ValueError(
                f"Invalid severity: {self.severity}. "
                f"Must be between {MIN_SEVERITY} and {MAX_SEVERITY}"
            )

    def _specific_fields(self) -> Dict[str, Any]:
        return {"malware.name": self.malware_name, "event.severity": self.severity}


Event = Union[AuthenticationEvent, ProcessEvent, MalwareEvent]
