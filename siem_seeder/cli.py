"""Command-line interface for the event loader."""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from siem_seeder.config.loader import load_vocabulary_from_file
from siem_seeder.config.settings import Settings, get_settings
from siem_seeder.core import DEFAULT_EVENT_COUNT, EventLoader
from siem_seeder.exceptions import EmptyCandidatesError, SchemaSetupError
from siem_seeder.generators.event import EventGenerator
from siem_seeder.generators.randomizers import RandomDataGenerator
from siem_seeder.indexers.elasticsearch import ElasticsearchIndexer
from siem_seeder.models.result import LoadResult
from siem_seeder.models.vocabulary import Vocabulary
from siem_seeder.utils.logger import setup_logging


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description="Load synthetic security events into Elasticsearch",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Load 500 events into logs-siem
  python -m siem_seeder

  # Load 50 events into a different index
  python -m siem_seeder --count 50 --index logs-siem-dev

  # Dry run - generate without indexing, save to file
  python -m siem_seeder --count 20 --dry-run --output events.json

  # Reproducible batch with custom users, hosts and processes
  python -m siem_seeder --seed 42 --vocabulary-file vocabulary.yaml
        """,
    )

    parser.add_argument(
        "--count",
        type=int,
        default=DEFAULT_EVENT_COUNT,
        help=f"Number of events to generate (default: {DEFAULT_EVENT_COUNT})",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Generate events but don't index them",
    )

    parser.add_argument("--output", type=str, help="Save generated events to JSON file")

    parser.add_argument("--seed", type=int, help="Random seed for reproducible events")

    parser.add_argument(
        "--vocabulary-file",
        type=str,
        help="Load users, hosts, IPs, processes and malware names from YAML file",
    )

    parser.add_argument("--index", type=str, help="Destination index (overrides INDEX_NAME)")

    return parser


def load_vocabulary(logger: logging.Logger, vocabulary_file: Optional[str]) -> Vocabulary:
    """
    Load vocabulary from file or default.

    Args:
        logger: Logger instance
        vocabulary_file: Optional path to vocabulary YAML file

    Returns:
        Vocabulary object
    """
    if not vocabulary_file:
        return Vocabulary()

    vocabulary = load_vocabulary_from_file(vocabulary_file)
    if vocabulary is None:
        logger.error(f"Failed to load vocabulary from {vocabulary_file}")
        sys.exit(1)
    return vocabulary


def print_summary(result: LoadResult, index_name: str, logger: logging.Logger) -> None:
    """Print load summary."""
    logger.info("=" * 70)
    logger.info("LOAD SUMMARY")
    logger.info("=" * 70)
    logger.info(f"Generated: {result.generated}")

    if result.dry_run:
        logger.info(f"Dry run complete - {result.generated} events generated (not indexed)")
        return

    logger.info(f"Inserted into {index_name}: {result.inserted}/{result.generated}")
    if result.errors:
        logger.error(f"Failures: {result.failed}")


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    logger = setup_logging(settings.log_level, settings.log_json)

    if args.count < 0:
        logger.error(f"--count must be zero or positive, got {args.count}")
        sys.exit(1)

    if args.index:
        try:
            settings = Settings(**{**settings.model_dump(), "index_name": args.index})
        except ValidationError as e:
            logger.error(f"Invalid index name {args.index!r}: {e}")
            sys.exit(1)

    logger.info("=" * 70)
    logger.info("SYNTHETIC SECURITY EVENTS LOADER")
    logger.info("=" * 70)
    logger.info(f"Target: {settings.elastic_url_with_protocol}/{settings.index_name}")
    logger.info(f"Event count: {args.count}")
    logger.info(f"Mode: {'Dry Run' if args.dry_run else 'Index to Elasticsearch'}")

    vocabulary = load_vocabulary(logger, args.vocabulary_file)
    generator = EventGenerator(vocabulary, RandomDataGenerator(seed=args.seed))
    indexer = ElasticsearchIndexer(settings)
    loader = EventLoader(settings, indexer, generator)

    try:
        result = loader.load(count=args.count, dry_run=args.dry_run, output_file=args.output)
    except SchemaSetupError as e:
        logger.error(f"Error loading test data: {e}")
        sys.exit(1)
    except EmptyCandidatesError as e:
        logger.error(f"Invalid vocabulary: {e}")
        sys.exit(1)

    print_summary(result, settings.index_name, logger)

    if result.errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
