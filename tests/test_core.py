"""Tests for EventLoader."""

import json
import tempfile
from pathlib import Path

import pytest

from siem_seeder.core import DEFAULT_EVENT_COUNT, EventLoader
from siem_seeder.exceptions import BulkWriteError, EmptyCandidatesError, SchemaSetupError
from siem_seeder.generators.event import EventGenerator
from siem_seeder.models.vocabulary import Vocabulary

COMMON_FIELDS = {"@timestamp", "host.name", "user.name", "source.ip", "event.type"}

SPECIFIC_FIELDS = {
    "authentication": {"event.outcome"},
    "process": {"process.name"},
    "malware": {"malware.name", "event.severity"},
}


def _submitted_documents(mock_indexer):
    args, _ = mock_indexer.bulk_create.call_args
    return args[0]


def test_initialization_with_settings_and_indexer(settings, mock_indexer):
    """Test EventLoader initialization with settings and indexer."""
    loader = EventLoader(settings, mock_indexer)

    assert loader.settings == settings
    assert loader.indexer == mock_indexer
    assert isinstance(loader.generator, EventGenerator)


def test_load_three_events(settings, mock_indexer, seeded_generator):
    """Test that load(3) submits exactly three well-formed documents."""
    loader = EventLoader(settings, mock_indexer, seeded_generator)

    result = loader.load(3)

    mock_indexer.ensure_index.assert_called_once()
    mock_indexer.bulk_create.assert_called_once()
    documents = _submitted_documents(mock_indexer)
    assert len(documents) == 3
    for document in documents:
        assert COMMON_FIELDS <= set(document)
        present = [
            event_type
            for event_type, group in SPECIFIC_FIELDS.items()
            if group & set(document)
        ]
        assert present == [document["event.type"]]

    assert result.generated == 3
    assert result.inserted == 3
    assert result.errors is False


def test_load_default_count(settings, mock_indexer, seeded_generator):
    """Test that load() defaults to 500 events."""
    loader = EventLoader(settings, mock_indexer, seeded_generator)

    result = loader.load()

    assert DEFAULT_EVENT_COUNT == 500
    assert len(_submitted_documents(mock_indexer)) == 500
    assert result.inserted == 500


def test_load_ensures_index_before_generating(settings, mock_indexer):
    """Test that schema setup runs before any event is generated."""
    calls = []
    mock_indexer.ensure_index.side_effect = lambda: calls.append("ensure_index")

    class RecordingGenerator(EventGenerator):
        def generate(self):
            calls.append("generate")
            return super().generate()

    loader = EventLoader(settings, mock_indexer, RecordingGenerator())
    loader.load(2)

    assert calls == ["ensure_index", "generate", "generate"]


def test_load_zero_is_a_no_op(settings, mock_indexer, seeded_generator):
    """Test that load(0) ensures the index but sends no bulk request."""
    loader = EventLoader(settings, mock_indexer, seeded_generator)

    result = loader.load(0)

    mock_indexer.ensure_index.assert_called_once()
    mock_indexer.bulk_create.assert_not_called()
    assert result.generated == 0
    assert result.inserted == 0
    assert result.errors is False


def test_load_negative_count_raises_error(settings, mock_indexer):
    """Test that a negative count is rejected before touching the store."""
    loader = EventLoader(settings, mock_indexer)

    with pytest.raises(ValueError, match="negative"):
        loader.load(-1)

    mock_indexer.ensure_index.assert_not_called()


def test_load_propagates_schema_setup_error(settings, mock_indexer):
    """Test that schema setup failures are not swallowed."""
    mock_indexer.ensure_index.side_effect = SchemaSetupError("logs-siem-test", "store unreachable")
    loader = EventLoader(settings, mock_indexer)

    with pytest.raises(SchemaSetupError, match="store unreachable"):
        loader.load(5)

    mock_indexer.bulk_create.assert_not_called()


def test_load_reports_partial_bulk_failure(settings, mock_indexer, seeded_generator):
    """Test that item-level failures are reported in the result."""
    mock_indexer.bulk_create.side_effect = None
    mock_indexer.bulk_create.return_value = {
        "errors": True,
        "items": [
            {"create": {"_id": "a", "status": 201}},
            {"create": {"status": 400, "error": {"type": "mapper_parsing_exception"}}},
            {"create": {"_id": "c", "status": 201}},
        ],
    }
    loader = EventLoader(settings, mock_indexer, seeded_generator)

    result = loader.load(3)

    assert result.errors is True
    assert result.inserted == 2
    assert result.failed == 1
    assert result.error_details[0]["item"] == 1
    assert result.error_details[0]["status"] == 400
    assert result.error_details[0]["error"]["type"] == "mapper_parsing_exception"


def test_load_reports_total_bulk_failure(settings, mock_indexer, seeded_generator):
    """Test that a failed bulk request is reported without raising."""
    mock_indexer.bulk_create.side_effect = BulkWriteError("Bulk request rejected: 503")
    loader = EventLoader(settings, mock_indexer, seeded_generator)

    result = loader.load(4)

    assert result.errors is True
    assert result.generated == 4
    assert result.inserted == 0
    assert result.error_details == [{"reason": "Bulk request rejected: 503"}]


def test_load_dry_run_skips_store(settings, mock_indexer, seeded_generator):
    """Test that dry run generates without any store call."""
    loader = EventLoader(settings, mock_indexer, seeded_generator)

    result = loader.load(5, dry_run=True)

    mock_indexer.ensure_index.assert_not_called()
    mock_indexer.bulk_create.assert_not_called()
    assert result.dry_run is True
    assert result.generated == 5
    assert result.inserted == 0


def test_load_output_file_creation(settings, mock_indexer, seeded_generator):
    """Test that generated documents are saved as a JSON array."""
    loader = EventLoader(settings, mock_indexer, seeded_generator)

    with tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False) as f:
        temp_path = f.name

    try:
        loader.load(3, dry_run=True, output_file=temp_path)

        with open(temp_path) as f:
            data = json.load(f)
        assert isinstance(data, list)
        assert len(data) == 3
        for document in data:
            assert COMMON_FIELDS <= set(document)
    finally:
        Path(temp_path).unlink()


def test_load_empty_vocabulary_raises_error(settings, mock_indexer):
    """Test that an empty candidate set stops the load before submission."""
    loader = EventLoader(settings, mock_indexer, EventGenerator(Vocabulary(users=[])))

    with pytest.raises(EmptyCandidatesError):
        loader.load(3)

    mock_indexer.bulk_create.assert_not_called()
