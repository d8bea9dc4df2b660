"""Slash-command definitions and dispatch."""
from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..config import WatchScope
from ..messaging.base import MessageCreator, OutboundMessage
from ..models import AssociationKey, CommandContext
from ..services.command_service import DatasetCommandService

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SlashCommand:
    """Represents a single slash command exposed to the chat platform."""

    command: str
    description: str
    params_example: str
    executor: Callable[[CommandContext], str]
    provides_preview: bool = False


class UnknownCommandError(LookupError):
    """Raised when dispatching a command that was never registered."""


def resolve_key(context: CommandContext, scope: WatchScope) -> AssociationKey:
    """Return the association key a command's watch list is stored under."""

    if scope == "room":
        return AssociationKey.for_room(context.room)
    if scope == "user":
        return AssociationKey.for_user(context.sender)
    return AssociationKey()


def parse_arguments(text: object) -> list[str]:
    return str(text).split() if text else []


class CommandRegistry:
    """Holds the registered slash commands and routes invocations to them."""

    def __init__(self) -> None:
        self._commands: dict[str, SlashCommand] = {}

    def register(self, command: SlashCommand) -> None:
        self._commands[command.command] = command

    def get(self, name: str) -> SlashCommand | None:
        return self._commands.get(name.lstrip("/"))

    def all_commands(self) -> list[SlashCommand]:
        return list(self._commands.values())

    def dispatch(self, name: str, context: CommandContext, creator: MessageCreator) -> OutboundMessage:
        """Run ``name`` for ``context`` and hand exactly one reply to ``creator``."""

        command = self.get(name)
        if command is None:
            raise UnknownCommandError(name)

        logger.debug("Running /%s for %s in %s", command.command, context.sender, context.room)
        message = creator.start_message(context, command.executor(context))
        creator.finish(message)
        return message


def build_registry(service: DatasetCommandService, scope: WatchScope = "global") -> CommandRegistry:
    """Register ``/datasets``, ``/watch`` and ``/watchlist``."""

    registry = CommandRegistry()
    registry.register(
        SlashCommand(
            command="datasets",
            description="List available datasets from Hugging Face",
            params_example="",
            executor=lambda context: service.list_datasets(),
        )
    )
    registry.register(
        SlashCommand(
            command="watch",
            description="Add a dataset to your watch list",
            params_example="<dataset_id>",
            executor=lambda context: service.watch(resolve_key(context, scope), context.first_argument),
        )
    )
    registry.register(
        SlashCommand(
            command="watchlist",
            description="Show your watched datasets",
            params_example="",
            executor=lambda context: service.show_watchlist(resolve_key(context, scope)),
        )
    )
    return registry
