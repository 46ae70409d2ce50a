"""Acknowledgement modes of a STOMP subscription."""

from __future__ import annotations

from enum import Enum

from stomplite.frame.constants import ACK_AUTO, ACK_CLIENT, ACK_CLIENT_INDIVIDUAL


class AckMode(Enum):
    """How messages on a subscription are acknowledged."""

    # The server assumes the client received the message.
    AUTO = ACK_AUTO
    # Acknowledging a message also acknowledges all earlier ones.
    CLIENT = ACK_CLIENT
    # Each message is acknowledged on its own.
    CLIENT_INDIVIDUAL = ACK_CLIENT_INDIVIDUAL

    def __str__(self) -> str:
        return self.value

    def should_ack(self) -> bool:
        """Return True if messages in this mode need acknowledging."""
        return self is not AckMode.AUTO