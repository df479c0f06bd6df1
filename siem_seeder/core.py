"""Core orchestration for generating and loading events."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from siem_seeder.config.settings import Settings
from siem_seeder.exceptions import BulkWriteError
from siem_seeder.generators.event import EventGenerator
from siem_seeder.indexers.base import BaseIndexer
from siem_seeder.models.result import LoadResult

logger = logging.getLogger(__name__)

DEFAULT_EVENT_COUNT = 500


class EventLoader:
    """Generates a batch of events and loads it in one bulk request."""

    def __init__(
        self,
        settings: Settings,
        indexer: BaseIndexer,
        generator: Optional[EventGenerator] = None,
    ) -> None:
        """
        Initialize event loader.

        Args:
            settings: Application settings
            indexer: Indexer for storing events
            generator: Optional event generator (built-in vocabulary if None)
        """
        self.settings = settings
        self.indexer = indexer
        self.generator = generator or EventGenerator()

    def load(
        self,
        count: int = DEFAULT_EVENT_COUNT,
        dry_run: bool = False,
        output_file: Optional[str] = None,
    ) -> LoadResult:
        """
        Ensure the index, generate events and submit them.

        Schema setup failures propagate as SchemaSetupError. Bulk write
        failures are logged and reported in the result instead.

        Args:
            count: Number of events to generate
            dry_run: If True, generate but don't touch the store
            output_file: If provided, save generated documents to JSON file

        Returns:
            LoadResult describing the run
        """
        if count < 0:
            raise ValueError(f"Event count cannot be negative, got {count}")

        if not dry_run:
            self.indexer.ensure_index()

        logger.info(f"Generating {count} synthetic security events...")
        documents = [self.generator.generate().to_document() for _ in range(count)]

        if output_file:
            self._save_documents(documents, output_file)

        if dry_run:
            logger.info(f"Dry run complete - {count} events generated (not indexed)")
            return LoadResult(generated=count, dry_run=True)

        # The bulk API rejects an empty body
        if not documents:
            logger.info("No events to submit, skipping bulk request")
            return LoadResult(generated=0)

        try:
            response = self.indexer.bulk_create(documents)
        except BulkWriteError as e:
            logger.error(f"Errors inserting data: {e}")
            return LoadResult(
                generated=count,
                errors=True,
                error_details=[{"reason": str(e)}],
            )

        return self._summarize(count, response)

    def _summarize(self, count: int, response: Dict[str, Any]) -> LoadResult:
        """Build a LoadResult from a bulk response."""
        items = response.get("items", [])
        error_details: List[Dict[str, Any]] = []
        for position, item in enumerate(items):
            outcome = item.get("create", {})
            if "error" in outcome:
                error_details.append(
                    {"item": position, "status": outcome.get("status"), "error": outcome["error"]}
                )

        inserted = len(items) - len(error_details)
        errors = bool(response.get("errors")) or bool(error_details)

        if errors:
            logger.error(f"Errors inserting data: {len(error_details)} of {count} documents failed")
            for detail in error_details:
                logger.error(f"Bulk item error: {json.dumps(detail, default=str)}")
        else:
            logger.info(f"Inserted {inserted} test events into {self.settings.index_name}")

        return LoadResult(
            generated=count,
            inserted=inserted,
            errors=errors,
            error_details=error_details,
        )

    @staticmethod
    def _save_documents(documents: List[Dict[str, Any]], output_file: str) -> None:
        output_path = Path(output_file)
        with output_path.open("w", encoding="utf-8") as f:
            json.dump(documents, f, indent=2)
        logger.info(f"Events saved to: {output_file}")
