"""Application bootstrapper for the dataset watch bot."""
from __future__ import annotations

import logging

from .config import AppConfig
from .web.app import bootstrap_app

logger = logging.getLogger(__name__)


def run() -> None:
    """Entrypoint used by the CLI to launch the command webhook."""

    config = AppConfig.from_env()
    logging.basicConfig(level=config.log_level)
    if not config.catalog.token:
        logger.warning("HF_TOKEN is not set; catalog requests are unauthenticated")

    app, registry = bootstrap_app(config)
    logger.info(
        "Serving %s commands with %s watch lists",
        len(registry.all_commands()),
        config.watch_scope,
    )
    app.run(debug=config.environment == "development")


if __name__ == "__main__":  # pragma: no cover - manual execution only
    run()
