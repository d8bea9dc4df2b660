"""Reply text for the dataset slash commands."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..api.client import (
    CatalogFailure,
    DatasetFound,
    DatasetListing,
    DatasetUnavailable,
    HuggingFaceClient,
)
from ..config import CatalogConfig
from ..models import AssociationKey, Dataset
from ..storage.repository import WatchListStorageError
from .watchlist_service import WatchlistService

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"

DATASETS_HEADER = "🤗 *Hugging Face Datasets*\n\n"
DATASETS_FOOTER = "\n_Showing datasets from Hugging Face_"
NO_DATASETS = "No datasets found or unexpected response format."
DATASETS_ERROR = "❌ Error: Unable to fetch datasets from Hugging Face. Please try again later."

MISSING_DATASET_ID = "❌ Please provide a dataset ID to watch"
WATCH_ERROR = "❌ Error: Unable to update watch list"

WATCHLIST_EMPTY = "📝 Your watch list is empty. Use `/watch <dataset_id>` to add datasets."
WATCHLIST_HEADER = "📋 *Your Watched Datasets*\n\n"
WATCHLIST_FOOTER = "_To remove a dataset from your watch list, use_ `/unwatch <dataset_id>`"
WATCHLIST_ERROR = "❌ Error: Unable to fetch your watch list"


def _or_na(value: object) -> str:
    return str(value) if value else NOT_AVAILABLE


@dataclass(slots=True)
class DatasetCommandService:
    """Implements ``/datasets``, ``/watch`` and ``/watchlist``.

    Every method returns the reply text and never raises: storage and
    catalog failures become fixed error messages.
    """

    client: HuggingFaceClient
    watchlist: WatchlistService
    catalog: CatalogConfig

    def list_datasets(self) -> str:
        result = self.client.search_datasets(
            search=self.catalog.search_term,
            author=self.catalog.author,
            limit=self.catalog.limit,
        )
        if isinstance(result, CatalogFailure):
            return DATASETS_ERROR

        text = DATASETS_HEADER
        if isinstance(result, DatasetListing):
            for index, dataset in enumerate(result.datasets, start=1):
                text += f"{index}. *{dataset.id}*\n"
                text += f"   Description: {_or_na(dataset.description)}\n"
                text += f"   Last modified: {_or_na(dataset.last_modified)}\n"
                text += f"   To watch this dataset, use: `/watch {dataset.id}`\n\n"
        else:
            text += NO_DATASETS

        return text + DATASETS_FOOTER

    def watch(self, key: AssociationKey, dataset_id: Optional[str]) -> str:
        if not dataset_id:
            return MISSING_DATASET_ID

        try:
            added = self.watchlist.add(key, dataset_id)
        except WatchListStorageError:
            logger.exception("Unable to add %s to %s", dataset_id, key.name)
            return WATCH_ERROR

        if not added:
            return f"📌 Dataset *{dataset_id}* is already in your watch list"
        logger.info("Watching %s under %s", dataset_id, key.name)
        return f"✅ Added *{dataset_id}* to your watch list"

    def show_watchlist(self, key: AssociationKey) -> str:
        try:
            watch_list = self.watchlist.load(key)
        except WatchListStorageError:
            logger.exception("Unable to read %s", key.name)
            return WATCHLIST_ERROR

        if not watch_list.datasets:
            return WATCHLIST_EMPTY

        text = WATCHLIST_HEADER
        # one lookup at a time, in stored order
        for index, dataset_id in enumerate(watch_list.datasets, start=1):
            result = self.client.fetch_dataset(dataset_id)
            if isinstance(result, DatasetFound):
                text += self._render_detail(index, result.dataset)
            elif isinstance(result, DatasetUnavailable):
                text += f"{index}. *{dataset_id}* (Unable to fetch details)\n\n"
            else:
                text += f"{index}. *{dataset_id}* (Error fetching details)\n\n"

        return text + WATCHLIST_FOOTER

    @staticmethod
    def _render_detail(index: int, dataset: Dataset) -> str:
        return (
            f"{index}. *{dataset.id}*\n"
            f"   Description: {_or_na(dataset.description)}\n"
            f"   Last modified: {_or_na(dataset.last_modified)}\n"
            f"   Downloads: {_or_na(dataset.downloads)}\n\n"
        )
