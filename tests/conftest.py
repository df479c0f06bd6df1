"""Pytest configuration and fixtures."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from siem_seeder.config.settings import Settings
from siem_seeder.generators.event import EventGenerator
from siem_seeder.generators.randomizers import RandomDataGenerator
from siem_seeder.indexers.base import BaseIndexer
from siem_seeder.models.event import AuthenticationEvent, MalwareEvent, ProcessEvent
from siem_seeder.models.vocabulary import Vocabulary


@pytest.fixture
def settings():
    """Create test settings instance."""
    return Settings(
        _env_file=None,
        elastic_url="localhost:9200",
        elastic_username="test",
        elastic_password="test",
        index_name="logs-siem-test",
        request_timeout=5,
    )


@pytest.fixture
def vocabulary():
    """Create a small vocabulary for testing."""
    return Vocabulary(
        users=["alice", "bob"],
        source_ips=["10.0.0.5", "192.168.1.10"],
        hosts=["web-01", "db-01"],
        processes=["sshd", "nginx"],
        malware=["trojan.exe", "worm.js"],
    )


@pytest.fixture
def seeded_generator(vocabulary):
    """Create an event generator with a fixed seed."""
    return EventGenerator(vocabulary, RandomDataGenerator(seed=1234))


@pytest.fixture
def fixed_time():
    """A fixed, timezone-aware point in time."""
    return datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_events(fixed_time):
    """One event of each type."""
    common = {
        "timestamp": fixed_time,
        "host": "web-01",
        "user": "alice",
        "source_ip": "10.0.0.5",
    }
    return [
        AuthenticationEvent(outcome="failure", **common),
        ProcessEvent(process_name="sshd", **common),
        MalwareEvent(malware_name="trojan.exe", severity=4, **common),
    ]


@pytest.fixture
def mock_indexer():
    """Create a mock indexer that accepts every document."""
    mock = MagicMock(spec=BaseIndexer)
    mock.ensure_index.return_value = False

    def bulk_create(documents):
        return {
            "errors": False,
            "items": [{"create": {"_id": f"id-{i}", "status": 201}} for i in range(len(documents))],
        }

    mock.bulk_create.side_effect = bulk_create
    return mock
