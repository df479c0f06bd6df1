"""Outcome of a batch load."""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List


@dataclass
class LoadResult:
    """
    Summary of a single load run.

    Attributes:
        generated: Number of events generated
        inserted: Number of documents the store acknowledged
        errors: True if the bulk request or any of its items failed
        error_details: Failure reasons, one entry per failed item or request
        dry_run: True if nothing was sent to the store
    """

    generated: int
    inserted: int = 0
    errors: bool = False
    error_details: List[Dict[str, Any]] = field(default_factory=list)
    dry_run: bool = False

    @property
    def failed(self) -> int:
        """Number of failures recorded."""
        return len(self.error_details)

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary for serialization."""
        return asdict(self)
