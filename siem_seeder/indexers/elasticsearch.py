"""Elasticsearch indexer implementation."""

import json
import logging
from typing import Any, Dict, List, Optional

import requests

from siem_seeder.config.mappings import INDEX_MAPPINGS
from siem_seeder.config.settings import Settings
from siem_seeder.exceptions import BulkWriteError, SchemaSetupError
from siem_seeder.indexers.base import BaseIndexer

logger = logging.getLogger(__name__)

COMPAT_ACCEPT = "application/vnd.elasticsearch+json; compatible-with=8"


class ElasticsearchIndexer(BaseIndexer):
    """Elasticsearch implementation of the indexer interface."""

    def __init__(self, settings: Settings) -> None:
        """
        Initialize Elasticsearch indexer.

        Args:
            settings: Application settings with Elasticsearch configuration
        """
        self.settings = settings
        self.base_url = settings.elastic_url_with_protocol
        self.auth = (settings.elastic_username, settings.elastic_password)
        self.verify = settings.elastic_verify_certs
        self.timeout = settings.request_timeout
        self.index_name = settings.index_name

    def index_exists(self) -> bool:
        """
        Check whether the destination index exists.

        Raises:
            SchemaSetupError: If the store is unreachable or answers unexpectedly
        """
        url = f"{self.base_url}/{self.index_name}"

        try:
            response = requests.head(
                url,
                auth=self.auth,
                headers={"Accept": COMPAT_ACCEPT},
                verify=self.verify,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise SchemaSetupError(self.index_name, f"store unreachable: {e}") from e

        if response.status_code == 200:
            return True
        if response.status_code == 404:
            return False
        raise SchemaSetupError(
            self.index_name, f"existence check returned HTTP {response.status_code}"
        )

    def ensure_index(self) -> bool:
        """
        Create the destination index with the event mapping if needed.

        Returns:
            True if the index was created, False if it already existed

        Raises:
            SchemaSetupError: If the index cannot be checked or created
        """
        if self.index_exists():
            logger.info(f"Index {self.index_name} already exists")
            return False

        logger.info(f"Creating index: {self.index_name}")
        url = f"{self.base_url}/{self.index_name}"

        try:
            response = requests.put(
                url,
                auth=self.auth,
                headers={"Content-Type": "application/json", "Accept": COMPAT_ACCEPT},
                json={"mappings": INDEX_MAPPINGS},
                verify=self.verify,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise SchemaSetupError(self.index_name, f"store unreachable: {e}") from e

        if response.status_code in [200, 201]:
            return True

        # Another writer created the index between our check and create
        if (
            response.status_code == 400
            and _error_type(response) == "resource_already_exists_exception"
        ):
            logger.info(f"Index {self.index_name} was created concurrently")
            return False

        raise SchemaSetupError(
            self.index_name,
            f"index creation returned HTTP {response.status_code} - {response.text}",
        )

    def bulk_create(self, documents: List[Dict[str, Any]]) -> Dict[str, Any]:
        """
        Create documents using the bulk API, refreshing the index on write.

        Args:
            documents: Documents to create

        Returns:
            Parsed bulk response (may report per-item errors)

        Raises:
            BulkWriteError: If the request fails or is rejected as a whole
        """
        url = f"{self.base_url}/_bulk"

        bulk_body = ""
        for document in documents:
            bulk_body += json.dumps({"create": {"_index": self.index_name}}) + "\n"
            bulk_body += json.dumps(document) + "\n"

        try:
            response = requests.post(
                url,
                auth=self.auth,
                headers={"Content-Type": "application/x-ndjson", "Accept": COMPAT_ACCEPT},
                data=bulk_body,
                params={"refresh": "true"},
                verify=self.verify,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise BulkWriteError(f"Bulk request failed: {e}") from e

        if response.status_code not in [200, 201]:
            raise BulkWriteError(
                f"Bulk request rejected: {response.status_code} - {response.text}"
            )

        try:
            result = response.json()
        except ValueError as e:
            raise BulkWriteError(f"Bulk response is not valid JSON: {e}") from e

        if result.get("errors"):
            logger.warning("Some documents failed to index")
        return result


def _error_type(response: requests.Response) -> Optional[str]:
    """Extract the Elasticsearch error type from an error response."""
    try:
        body = response.json()
    except ValueError:
        return None
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict):
        return error.get("type")
    return None
