"""Vocabulary loading from YAML files."""

import logging
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from siem_seeder.models.vocabulary import Vocabulary

logger = logging.getLogger(__name__)


def load_vocabulary_from_file(filepath: str) -> Optional[Vocabulary]:
    """
    Load generator candidate values from a YAML file.

    The file holds a top-level ``vocabulary`` mapping. Keys left out keep
    their built-in defaults.

    Args:
        filepath: Path to YAML file

    Returns:
        Vocabulary object, or None if loading fails
    """
    filepath_obj = Path(filepath)
    if not filepath_obj.exists():
        logger.error(f"Vocabulary file not found: {filepath}")
        return None

    try:
        with filepath_obj.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Error loading vocabulary file: {e}", exc_info=True)
        return None

    if not isinstance(data, dict) or not isinstance(data.get("vocabulary"), dict):
        logger.error(f"Vocabulary file {filepath} has no 'vocabulary' mapping")
        return None

    try:
        vocabulary = _dict_to_vocabulary(data["vocabulary"])
    except (ValueError, TypeError) as e:
        logger.error(f"Invalid vocabulary format in {filepath}: {e}")
        return None

    logger.info(f"Loaded vocabulary from {filepath}")
    return vocabulary


def _dict_to_vocabulary(vocabulary_dict: Dict[str, Any]) -> Vocabulary:
    """
    Convert dictionary to Vocabulary object.

    Raises:
        ValueError: If a key is unknown or a value is not a list of scalars
    """
    known = {f.name for f in fields(Vocabulary)}
    unknown = sorted(set(vocabulary_dict) - known)
    if unknown:
        raise ValueError(f"Unknown vocabulary keys: {unknown}")

    values: Dict[str, List[str]] = {}
    for key, items in vocabulary_dict.items():
        if not isinstance(items, list):
            raise ValueError(f"'{key}' must be a list, got {type(items).__name__}")
        if any(isinstance(item, (dict, list)) or item is None for item in items):
            raise ValueError(f"'{key}' must contain only plain values")
        values[key] = [str(item) for item in items]

    return Vocabulary(**values)
