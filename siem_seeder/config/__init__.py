"""Configuration management for the event loader."""

from siem_seeder.config.loader import load_vocabulary_from_file
from siem_seeder.config.mappings import INDEX_MAPPINGS
from siem_seeder.config.settings import Settings

__all__ = ["Settings", "INDEX_MAPPINGS", "load_vocabulary_from_file"]
