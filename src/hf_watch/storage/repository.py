"""JSON file storage for dataset watch lists."""
from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from urllib.parse import quote

from ..models import AssociationKey, WatchList

logger = logging.getLogger(__name__)


class WatchListStorageError(RuntimeError):
    """Raised when a stored watch list cannot be read or written."""


class JsonWatchListRepository:
    """Persists one watch list record per association key.

    Writes replace the whole record. There is no version check, so two
    concurrent read-modify-write cycles on the same key keep the last write.
    """

    def __init__(self, base_path: Path) -> None:
        self._base_path = base_path
        self._base_path.mkdir(parents=True, exist_ok=True)

    def _file_for(self, key: AssociationKey) -> Path:
        safe_name = quote(key.name, safe="")
        return self._base_path / f"{safe_name}.json"

    def file_path_for(self, key: AssociationKey) -> Path:
        """Public accessor for the JSON path associated with a key."""

        return self._file_for(key)

    def read(self, key: AssociationKey) -> WatchList:
        """Return the stored watch list, or an empty one when none exists."""

        file_path = self._file_for(key)
        try:
            with file_path.open("r", encoding="utf-8") as handle:
                return WatchList.from_payload(json.load(handle))
        except FileNotFoundError:
            return WatchList()
        except (OSError, ValueError) as exc:
            raise WatchListStorageError(f"Unable to read watch list {key.name}") from exc

    def write(self, key: AssociationKey, watch_list: WatchList) -> None:
        """Replace the stored record for ``key`` with ``watch_list``."""

        file_path = self._file_for(key)
        try:
            fd, tmp_name = tempfile.mkstemp(dir=self._base_path, suffix=".tmp")
        except OSError as exc:
            raise WatchListStorageError(f"Unable to write watch list {key.name}") from exc

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(watch_list.to_payload(), handle, indent=2)
            os.replace(tmp_name, file_path)
        except OSError as exc:
            Path(tmp_name).unlink(missing_ok=True)
            raise WatchListStorageError(f"Unable to write watch list {key.name}") from exc
        logger.debug("Stored %s datasets under %s", len(watch_list), key.name)
