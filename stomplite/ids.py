"""Process-wide allocation of unique identifiers."""

from __future__ import annotations

import threading


class _IdAllocator:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last = 0

    def allocate(self) -> str:
        with self._lock:
            self._last += 1
            return str(self._last)

    def reset(self) -> None:
        with self._lock:
            self._last = 0


_allocator = _IdAllocator()


def allocate_id() -> str:
    """Return the next identifier, starting at "1"; safe across threads."""
    return _allocator.allocate()


def reset_ids() -> None:
    """Start numbering from one again."""
    _allocator.reset()