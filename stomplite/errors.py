"""Errors reported by a STOMP client."""

from __future__ import annotations

from stomplite.frame.constants import ERROR
from stomplite.frame.frame import Frame
from stomplite.frame.header import MESSAGE

INVALID_COMMAND = "invalid command"
INVALID_FRAME_FORMAT = "invalid frame format"
UNSUPPORTED_VERSION = "unsupported version"
COMPLETED_TRANSACTION = "transaction is completed"
NACK_NOT_SUPPORTED = "NACK not supported in STOMP 1.0"
NOT_RECEIVED_MESSAGE = "cannot ack/nack a message, not from server"
CANNOT_NACK_AUTO_SUB = "cannot send NACK for a subscription with ack:auto"
COMPLETED_SUBSCRIPTION = "subscription is unsubscribed"
CLOSED_UNEXPECTEDLY = "connection closed unexpectedly"
ALREADY_CLOSED = "connection already closed"
MSG_SEND_TIMEOUT = "msg send timeout"
MSG_RECEIPT_TIMEOUT = "msg receipt timeout"
NIL_OPTION = "nil option"


class StompError(Exception):
    """A STOMP error, with the frame that caused it when there is one."""

    def __init__(self, message: str, frame: Frame | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.frame = frame

    def __str__(self) -> str:
        return self.message


def missing_header(name: str) -> StompError:
    """Return the error for a required header entry that is absent."""
    return StompError("missing header: " + name)


def error_from_frame(frame: Frame) -> StompError:
    """Build the error for an ERROR frame or an unexpected frame."""
    if frame.command == ERROR:
        text = frame.header.get(MESSAGE) if frame.header is not None else ""
        message = text or "ERROR frame, missing message header"
    else:
        message = "Unexpected frame: " + frame.command
    return StompError(message, frame)