"""STOMP frames."""

from __future__ import annotations

from dataclasses import dataclass

from stomplite.frame.header import Header


@dataclass
class Frame:
    """A STOMP frame: a command, header entries and an optional body."""

    command: str
    header: Header | None = None
    body: bytes = b""

    def clone(self) -> Frame:
        """Return a copy with its own header and body."""
        return Frame(
            command=self.command,
            header=None if self.header is None else self.header.clone(),
            body=bytes(self.body),
        )


def new_frame(command: str, *args: str) -> Frame:
    """Create a frame whose header holds the given key, value pairs."""
    if len(args) % 2:
        raise ValueError("header entries must come in key, value pairs")
    return Frame(command=command, header=Header(*args))