"""Flask webhook the chat platform posts slash commands to."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from flask import Flask, jsonify, request

from ..api.client import HuggingFaceClient
from ..commands.registry import CommandRegistry, UnknownCommandError, build_registry, parse_arguments
from ..config import AppConfig
from ..messaging.base import BufferedMessageCreator
from ..models import CommandContext
from ..services.command_service import DatasetCommandService
from ..services.watchlist_service import WatchlistService
from ..storage.repository import JsonWatchListRepository


def _command_context() -> CommandContext:
    payload = request.get_json(silent=True)
    data: Mapping[str, Any] = payload if isinstance(payload, Mapping) else request.form.to_dict()
    sender = data.get("user_name") or data.get("user_id") or "anonymous"
    room = data.get("channel_name") or data.get("room") or "general"
    return CommandContext(sender=str(sender), room=str(room), arguments=parse_arguments(data.get("text")))


def create_app(registry: CommandRegistry, client: HuggingFaceClient) -> Flask:
    app = Flask(__name__)

    app.config["registry"] = registry
    app.config["client"] = client

    @app.route("/commands")
    def list_commands():
        return jsonify(
            [
                {
                    "command": command.command,
                    "description": command.description,
                    "params_example": command.params_example,
                    "provides_preview": command.provides_preview,
                }
                for command in registry.all_commands()
            ]
        )

    @app.route("/commands/<name>", methods=["POST"])
    def run_command(name: str):
        context = _command_context()
        creator = BufferedMessageCreator()
        try:
            message = registry.dispatch(name, context, creator)
        except UnknownCommandError:
            return jsonify({"error": f"Unknown command: /{name}"}), 404
        return jsonify(
            {
                "command": name,
                "sender": message.sender,
                "room": message.room,
                "text": message.text,
            }
        )

    @app.route("/health")
    def health():
        status = client.health_check()
        return jsonify({"ok": status["ok"], "checked_at": status["checked_at"].isoformat()}), (
            200 if status["ok"] else 503
        )

    return app


def bootstrap_app(config: AppConfig) -> tuple[Flask, CommandRegistry]:
    """Factory used by the entrypoint for running the webhook."""

    config.ensure_data_directories()
    repository = JsonWatchListRepository(config.watchlist_directory)
    client = HuggingFaceClient.from_config(config.catalog)
    service = DatasetCommandService(
        client=client,
        watchlist=WatchlistService(repository=repository),
        catalog=config.catalog,
    )
    registry = build_registry(service, scope=config.watch_scope)

    app = create_app(registry, client)
    return app, registry
