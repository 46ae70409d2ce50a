"""Encoding and decoding of STOMP header names and values."""

from __future__ import annotations

import re

_ENCODE_TABLE = str.maketrans(
    {
        "\\": "\\\\",
        "\r": "\\r",
        "\n": "\\n",
        ":": "\\c",
    }
)

_UNENCODE_MAP = {
    "r": "\r",
    "n": "\n",
    "c": ":",
    "\\": "\\",
}

_ESCAPE_RE = re.compile(r"\\([rnc\\])")


def encode_value(value: str) -> str:
    """Escape a header name or value using STOMP value encoding."""
    return value.translate(_ENCODE_TABLE)


def unencode_value(value: str | bytes) -> str:
    """Undo STOMP value encoding; unknown escape sequences are kept as they are."""
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode("utf-8", errors="surrogateescape")
    return _ESCAPE_RE.sub(lambda m: _UNENCODE_MAP[m.group(1)], value)