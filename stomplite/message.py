"""Messages received from a STOMP server."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from stomplite.ack import AckMode
from stomplite.frame.header import Header


@dataclass
class Message:
    """A message received on a subscription.

    When ``err`` is set the message stands for an ERROR frame or a
    connection failure rather than a MESSAGE frame.
    """

    destination: str = ""
    content_type: str = ""
    body: bytes = b""
    header: Header | None = None
    conn: Any = None
    subscription: Any = None
    err: Exception | None = None

    def should_ack(self) -> bool:
        """Return True if the server expects this message to be acknowledged."""
        if self.subscription is None:
            return False
        return self.subscription.ack_mode is not AckMode.AUTO

    def read(self, size: int = -1) -> bytes:
        """Consume up to size bytes of the body (all when size < 0); b"" at the end."""
        if size < 0 or size >= len(self.body):
            data, self.body = self.body, b""
        else:
            data, self.body = self.body[:size], self.body[size:]
        return data

    def read_byte(self) -> int:
        """Consume one byte of the body; raise EOFError when it is empty."""
        if not self.body:
            raise EOFError("message body exhausted")
        value = self.body[0]
        self.body = self.body[1:]
        return value