"""Data models for the event loader."""

from siem_seeder.models.event import (
    AuthenticationEvent,
    Event,
    EventType,
    MalwareEvent,
    ProcessEvent,
)
from siem_seeder.models.result import LoadResult
from siem_seeder.models.vocabulary import Vocabulary

__all__ = [
    "Event",
    "EventType",
    "AuthenticationEvent",
    "ProcessEvent",
    "MalwareEvent",
    "LoadResult",
    "Vocabulary",
]
