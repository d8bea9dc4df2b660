"""Domain models used throughout the dataset watch bot."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

WATCH_LIST_ASSOCIATION = "dataset-watch-list"


def _count(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


@dataclass(slots=True)
class Dataset:
    """Dataset metadata as returned by the Hugging Face catalog."""

    id: str
    description: Optional[str] = None
    last_modified: Optional[str] = None
    downloads: Optional[float] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any], fallback_id: str = "") -> Dataset:
        return cls(
            id=str(payload.get("id") or fallback_id),
            description=payload.get("description"),
            last_modified=payload.get("lastModified"),
            downloads=_count(payload.get("downloads")),
        )


@dataclass(slots=True)
class WatchList:
    """Ordered, duplicate-free sequence of watched dataset identifiers."""

    datasets: list[str] = field(default_factory=list)

    def __contains__(self, dataset_id: object) -> bool:
        return dataset_id in self.datasets

    def __len__(self) -> int:
        return len(self.datasets)

    def to_payload(self) -> dict[str, list[str]]:
        return {"datasets": list(self.datasets)}

    @classmethod
    def from_payload(cls, payload: Any) -> WatchList:
        if not isinstance(payload, Mapping):
            raise ValueError("Watch list record must be a JSON object")
        datasets = payload.get("datasets", [])
        if not isinstance(datasets, list):
            raise ValueError("Watch list 'datasets' must be a list")
        return cls(datasets=[str(dataset_id) for dataset_id in datasets])


@dataclass(frozen=True, slots=True)
class AssociationKey:
    """Identifies the persisted record a watch list lives under."""

    name: str = WATCH_LIST_ASSOCIATION

    @classmethod
    def for_room(cls, room: str) -> AssociationKey:
        return cls(name=f"{WATCH_LIST_ASSOCIATION}:room:{room}")

    @classmethod
    def for_user(cls, user: str) -> AssociationKey:
        return cls(name=f"{WATCH_LIST_ASSOCIATION}:user:{user}")


@dataclass(slots=True)
class CommandContext:
    """A single slash-command invocation."""

    sender: str
    room: str
    arguments: list[str] = field(default_factory=list)

    @property
    def first_argument(self) -> Optional[str]:
        return self.arguments[0] if self.arguments else None
