"""Outbound chat message abstractions."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..models import CommandContext


@dataclass(slots=True)
class OutboundMessage:
    """A reply posted back to the room a command came from."""

    sender: str
    room: str
    text: str


class MessageCreator(ABC):
    """Base class for delivering command replies to the chat platform."""

    def start_message(self, context: CommandContext, text: str) -> OutboundMessage:
        return OutboundMessage(sender=context.sender, room=context.room, text=text)

    @abstractmethod
    def finish(self, message: OutboundMessage) -> None:
        """Dispatch the provided message."""


class BufferedMessageCreator(MessageCreator):
    """Keeps finished messages so a webhook can return them in its response."""

    def __init__(self) -> None:
        self.messages: list[OutboundMessage] = []

    def finish(self, message: OutboundMessage) -> None:
        self.messages.append(message)

