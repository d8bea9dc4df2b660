from __future__ import annotations

import pytest

from hf_watch.commands.registry import (
    CommandRegistry,
    SlashCommand,
    UnknownCommandError,
    build_registry,
    parse_arguments,
    resolve_key,
)
from hf_watch.messaging.base import BufferedMessageCreator
from hf_watch.models import AssociationKey, CommandContext


class RecordingService:
    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def list_datasets(self) -> str:
        self.calls.append(("datasets",))
        return "listing"

    def watch(self, key, dataset_id) -> str:
        self.calls.append(("watch", key, dataset_id))
        return "watched"

    def show_watchlist(self, key) -> str:
        self.calls.append(("watchlist", key))
        return "shown"


@pytest.fixture
def context() -> CommandContext:
    return CommandContext(sender="alice", room="general", arguments=["user/alpha", "ignored"])


def test_parse_arguments_splits_on_whitespace() -> None:
    assert parse_arguments("  user/alpha   extra ") == ["user/alpha", "extra"]
    assert parse_arguments("") == []
    assert parse_arguments(None) == []


def test_resolve_key_scopes(context: CommandContext) -> None:
    assert resolve_key(context, "global") == AssociationKey(name="dataset-watch-list")
    assert resolve_key(context, "room") == AssociationKey.for_room("general")
    assert resolve_key(context, "user") == AssociationKey.for_user("alice")


def test_build_registry_registers_three_commands() -> None:
    registry = build_registry(RecordingService())

    commands = {command.command: command for command in registry.all_commands()}

    assert set(commands) == {"datasets", "watch", "watchlist"}
    assert commands["watch"].params_example == "<dataset_id>"
    assert not any(command.provides_preview for command in commands.values())
    assert registry.get("unwatch") is None


def test_dispatch_watch_passes_first_argument(context: CommandContext) -> None:
    service = RecordingService()
    registry = build_registry(service, scope="room")
    creator = BufferedMessageCreator()

    message = registry.dispatch("/watch", context, creator)

    assert service.calls == [("watch", AssociationKey.for_room("general"), "user/alpha")]
    assert message.text == "watched"
    assert message.sender == "alice" and message.room == "general"
    assert creator.messages == [message]


def test_dispatch_produces_exactly_one_reply(context: CommandContext) -> None:
    service = RecordingService()
    registry = build_registry(service)
    creator = BufferedMessageCreator()

    registry.dispatch("datasets", context, creator)
    registry.dispatch("watchlist", context, creator)

    assert [message.text for message in creator.messages] == ["listing", "shown"]
    assert service.calls[1] == ("watchlist", AssociationKey())


def test_dispatch_unknown_command_raises(context: CommandContext) -> None:
    registry = CommandRegistry()
    registry.register(SlashCommand(command="ping", description="", params_example="", executor=lambda ctx: "pong"))

    with pytest.raises(UnknownCommandError):
        registry.dispatch("unwatch", context, BufferedMessageCreator())
