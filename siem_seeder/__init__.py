"""
SIEM Seeder - synthetic security events for Elasticsearch.

Generates authentication, process and malware detection events and bulk-loads
them into a search index, creating the index mapping on demand.
"""

__version__ = "1.0.0"

from siem_seeder.core import EventLoader
from siem_seeder.models.event import AuthenticationEvent, Event, MalwareEvent, ProcessEvent
from siem_seeder.models.result import LoadResult

__all__ = [
    "EventLoader",
    "Event",
    "AuthenticationEvent",
    "ProcessEvent",
    "MalwareEvent",
    "LoadResult",
]
