"""Client for interacting with the Hugging Face dataset catalog."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Union

import requests

from ..config import CatalogConfig
from ..models import Dataset

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DatasetListing:
    """Search succeeded and the body was a JSON array."""

    datasets: list[Dataset] = field(default_factory=list)


@dataclass(slots=True)
class UnexpectedPayload:
    """Search returned JSON that is not an array, e.g. an error envelope."""

    payload: Any


@dataclass(slots=True)
class DatasetFound:
    dataset: Dataset


@dataclass(slots=True)
class DatasetUnavailable:
    """The catalog answered a detail lookup with a non-2xx status."""

    status_code: int


@dataclass(slots=True)
class CatalogFailure:
    """The request never produced a usable response."""

    reason: str


SearchResult = Union[DatasetListing, UnexpectedPayload, CatalogFailure]
DetailResult = Union[DatasetFound, DatasetUnavailable, CatalogFailure]


@dataclass(slots=True)
class HuggingFaceClient:
    """Handles communication with the Hugging Face dataset API.

    Network and decoding errors never escape this class; they are reported as
    :class:`CatalogFailure` so callers can branch on the result type.
    """

    api_base_url: str
    token: str | None = None
    timeout: float = 10.0

    @classmethod
    def from_config(cls, config: CatalogConfig) -> HuggingFaceClient:
        return cls(api_base_url=config.base_url, token=config.token, timeout=config.timeout_seconds)

    def build_headers(self) -> dict[str, str]:
        """Return HTTP headers for catalog requests."""

        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    def search_datasets(self, search: str, author: str, limit: int) -> SearchResult:
        """Search the catalog for at most ``limit`` datasets.

        The response status is not checked: the catalog reports errors as a
        JSON object, which surfaces as :class:`UnexpectedPayload`.
        """

        endpoint = f"{self.api_base_url.rstrip('/')}/datasets"
        params: dict[str, Any] = {
            "search": search,
            "author": author,
            "limit": limit,
            "full": "true",
        }

        try:
            response = requests.get(
                endpoint,
                headers=self.build_headers(),
                params=params,
                timeout=self.timeout,
            )
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Dataset search failed: %s", exc)
            return CatalogFailure(reason=str(exc))

        if not isinstance(payload, list):
            return UnexpectedPayload(payload=payload)

        # entries that are not objects carry no dataset id and are skipped
        datasets = [Dataset.from_payload(entry) for entry in payload if isinstance(entry, Mapping)]
        return DatasetListing(datasets=datasets)

    def fetch_dataset(self, dataset_id: str) -> DetailResult:
        """Fetch live metadata for a single dataset."""

        endpoint = f"{self.api_base_url.rstrip('/')}/datasets/{dataset_id}"
        try:
            response = requests.get(endpoint, headers=self.build_headers(), timeout=self.timeout)
            if not response.ok:
                logger.info("Catalog returned %s for %s", response.status_code, dataset_id)
                return DatasetUnavailable(status_code=response.status_code)
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Fetching %s failed: %s", dataset_id, exc)
            return CatalogFailure(reason=str(exc))

        if not isinstance(payload, Mapping):
            return CatalogFailure(reason="Dataset detail is not a JSON object")
        return DatasetFound(dataset=Dataset.from_payload(payload, fallback_id=dataset_id))

    def health_check(self) -> dict[str, Any]:
        """Perform a lightweight request to ensure the API is reachable."""

        try:
            response = requests.get(self.api_base_url, headers=self.build_headers(), timeout=self.timeout)
            response.raise_for_status()
            return {"ok": True, "checked_at": datetime.now(UTC)}
        except requests.RequestException as exc:
            return {"ok": False, "error": str(exc), "checked_at": datetime.now(UTC)}
