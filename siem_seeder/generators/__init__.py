"""Event generators."""

from siem_seeder.generators.event import EventGenerator
from siem_seeder.generators.randomizers import RandomDataGenerator

__all__ = [
    "EventGenerator",
    "RandomDataGenerator",
]
