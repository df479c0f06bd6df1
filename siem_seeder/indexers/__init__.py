"""Indexers that persist generated events."""

from siem_seeder.indexers.base import BaseIndexer
from siem_seeder.indexers.elasticsearch import ElasticsearchIndexer

__all__ = ["BaseIndexer", "ElasticsearchIndexer"]
