"""The header part of a STOMP frame."""

from __future__ import annotations

import re
from collections.abc import Iterator

# STOMP header names.
CONTENT_LENGTH = "content-length"
CONTENT_TYPE = "content-type"
RECEIPT = "receipt"
ACCEPT_VERSION = "accept-version"
HOST = "host"
VERSION = "version"
LOGIN = "login"
PASSCODE = "passcode"
HEART_BEAT = "heart-beat"
SESSION = "session"
SERVER = "server"
DESTINATION = "destination"
ID = "id"
ACK = "ack"
TRANSACTION = "transaction"
RECEIPT_ID = "receipt-id"
SUBSCRIPTION = "subscription"
MESSAGE_ID = "message-id"
MESSAGE = "message"

_DIGITS_RE = re.compile(r"[0-9]+")
_MAX_CONTENT_LENGTH = 2**32 - 1


class Header:
    """An ordered list of key/value entries; a key may appear more than once.

    Where a key appears several times, the first entry holds the value.
    """

    def __init__(self, *args: str) -> None:
        items = list(args)
        if len(items) % 2:
            items.append("")
        self._entries: list[tuple[str, str]] = list(zip(items[::2], items[1::2]))

    def add(self, key: str, value: str) -> None:
        """Append an entry."""
        self._entries.append((key, value))

    def add_header(self, header: Header | None) -> None:
        """Append all entries of another header."""
        if header is not None:
            self._entries.extend(header)

    def set(self, key: str, value: str) -> None:
        """Replace the first entry for key, or append one if there is none."""
        for position, (existing, _) in enumerate(self._entries):
            if existing == key:
                self._entries[position] = (key, value)
                return
        self._entries.append((key, value))

    def get(self, key: str) -> str:
        """Return the first value for key, or "" if there is none."""
        value = self.contains(key)
        return "" if value is None else value

    def get_all(self, key: str) -> list[str]:
        """Return every value for key, in order."""
        return [value for existing, value in self._entries if existing == key]

    def get_at(self, index: int) -> tuple[str, str]:
        """Return the (key, value) entry at index."""
        if not 0 <= index < len(self._entries):
            raise IndexError("header index out of range")
        return self._entries[index]

    def contains(self, key: str) -> str | None:
        """Return the first value for key, or None if the key is absent."""
        for existing, value in self._entries:
            if existing == key:
                return value
        return None

    def __contains__(self, key: object) -> bool:
        return any(existing == key for existing, _ in self._entries)

    def delete(self, key: str) -> None:
        """Remove every entry for key."""
        self._entries = [entry for entry in self._entries if entry[0] != key]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(list(self._entries))

    def clone(self) -> Header:
        """Return an independent copy."""
        copy = Header()
        copy._entries = list(self._entries)
        return copy

    def content_length(self) -> int | None:
        """Return the content-length value, or None if it is absent.

        Raises ValueError if the value is not a valid unsigned 32-bit integer.
        """
        text = self.contains(CONTENT_LENGTH)
        if text is None:
            return None
        if not _DIGITS_RE.fullmatch(text):
            raise ValueError(f"invalid content-length: {text!r}")
        value = int(text)
        if value > _MAX_CONTENT_LENGTH:
            raise ValueError(f"content-length out of range: {text!r}")
        return value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Header):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"Header({self._entries!r})"