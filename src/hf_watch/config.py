"""Configuration settings for the Hugging Face dataset watch bot."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Mapping

WatchScope = Literal["global", "room", "user"]

_SCOPES: tuple[str, ...] = ("global", "room", "user")


@dataclass(slots=True)
class CatalogConfig:
    """Settings related to the Hugging Face dataset catalog."""

    base_url: str = "https://huggingface.co/api"
    token: str | None = None
    """Bearer token sent with every catalog request, if set."""

    search_term: str = "test-dataset"
    author: str = "ryua22222"
    limit: int = 5
    """Number of datasets returned by ``/datasets``."""

    timeout_seconds: float = 10.0


@dataclass(slots=True)
class AppConfig:
    """Top-level configuration for the application."""

    environment: Literal["development", "production"] = "production"
    """``development`` runs the webhook with the Flask debugger enabled."""

    data_directory: Path = field(default_factory=lambda: Path("data"))
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    watch_scope: WatchScope = "global"
    """How watch lists are partitioned: one shared list, per room or per user."""

    log_level: str = "INFO"

    @property
    def watchlist_directory(self) -> Path:
        return self.data_directory / "watchlists"

    def ensure_data_directories(self) -> None:
        """Create data directories required by the application."""

        self.watchlist_directory.mkdir(parents=True, exist_ok=True)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppConfig:
        """Build a configuration from ``HF_*`` environment variables."""

        env = os.environ if environ is None else environ
        config = cls()
        config.catalog.token = env.get("HF_TOKEN") or None
        if env.get("HF_WATCH_CATALOG_URL"):
            config.catalog.base_url = env["HF_WATCH_CATALOG_URL"]
        if env.get("HF_WATCH_DATA_DIR"):
            config.data_directory = Path(env["HF_WATCH_DATA_DIR"])
        if env.get("HF_WATCH_ENV", "").lower() == "development":
            config.environment = "development"

        scope = env.get("HF_WATCH_SCOPE", config.watch_scope).lower()
        if scope not in _SCOPES:
            raise ValueError(f"Unknown watch scope: {scope}")
        config.watch_scope = scope  # type: ignore[assignment]

        config.log_level = env.get("HF_WATCH_LOG_LEVEL", config.log_level).upper()
        return config


DEFAULT_CONFIG = AppConfig()
