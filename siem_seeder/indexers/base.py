"""Abstract base class for indexers."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List


class BaseIndexer(ABC):
    """Abstract base class for all indexers."""

    @abstractmethod
    def ensure_index(self) -> bool:
        """
        Create the destination index with its mapping if it does not exist.

        Returns:
            True if the index was created, False if it already existed

        Raises:
            SchemaSetupError: If the index cannot be checked or created
        """
        pass

    @abstractmethod
    def bulk_create(self, documents: List[Dict[str, Any]]) -> Dict[str, Any]:
        """
        Submit documents in a single bulk request.

        Args:
            documents: Documents to create

        Returns:
            Bulk response with per-item results

        Raises:
            BulkWriteError: If the request as a whole fails
        """
        pass
