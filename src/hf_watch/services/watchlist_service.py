"""Service for managing dataset watch lists."""
from __future__ import annotations

from dataclasses import dataclass

from ..models import AssociationKey, WatchList
from ..storage.repository import JsonWatchListRepository


@dataclass(slots=True)
class WatchlistService:
    """Reads and appends to the persisted watch list for a key."""

    repository: JsonWatchListRepository

    def load(self, key: AssociationKey) -> WatchList:
        return self.repository.read(key)

    def add(self, key: AssociationKey, dataset_id: str) -> bool:
        """Append ``dataset_id`` unless already watched.

        Returns ``False`` without writing when the identifier is present.
        """

        watch_list = self.repository.read(key)
        if dataset_id in watch_list:
            return False

        watch_list.datasets.append(dataset_id)
        self.repository.write(key, watch_list)
        return True
