"""Parsing of the STOMP heart-beat header value."""

from __future__ import annotations

import re
from datetime import timedelta

_HEART_BEAT_RE = re.compile(r"[0-9]+,[0-9]+")

# Largest millisecond count representable as a signed 64-bit nanosecond duration.
_MAX_MILLISECONDS = (2**63 - 1) // 1_000_000


class InvalidHeartBeatError(ValueError):
    """The heart-beat value is malformed or out of range."""

    def __init__(self, message: str = "invalid heart-beat") -> None:
        super().__init__(message)


def parse_heart_beat(heart_beat: str) -> tuple[timedelta, timedelta]:
    """Parse "x,y" (milliseconds) into two durations."""
    if not _HEART_BEAT_RE.fullmatch(heart_beat):
        raise InvalidHeartBeatError()
    first, second = (int(part) for part in heart_beat.split(","))
    if first > _MAX_MILLISECONDS or second > _MAX_MILLISECONDS:
        raise InvalidHeartBeatError()
    return timedelta(milliseconds=first), timedelta(milliseconds=second)