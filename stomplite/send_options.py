"""Options applied to SEND frames before they are sent."""

from __future__ import annotations

from collections.abc import Callable

from stomplite.errors import INVALID_COMMAND, StompError
from stomplite.frame.constants import SEND
from stomplite.frame.frame import Frame
from stomplite.frame.header import CONTENT_LENGTH, RECEIPT, Header
from stomplite.ids import allocate_id


def _send_header(frame: Frame) -> Header:
    if frame.command != SEND:
        raise StompError(INVALID_COMMAND)
    if frame.header is None:
        frame.header = Header()
    return frame.header


def receipt(frame: Frame) -> None:
    """Ask the server to acknowledge the frame with a RECEIPT."""
    _send_header(frame).set(RECEIPT, allocate_id())


def no_content_length(frame: Frame) -> None:
    """Drop the content-length header entry."""
    _send_header(frame).delete(CONTENT_LENGTH)


def header(key: str, value: str) -> Callable[[Frame], None]:
    """Return an option that adds a custom header entry."""

    def apply(frame: Frame) -> None:
        _send_header(frame).add(key, value)

    return apply