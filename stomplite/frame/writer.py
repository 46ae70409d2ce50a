"""Writing STOMP frames to a binary stream."""

from __future__ import annotations

from typing import BinaryIO

from stomplite.frame.codec import encode_value
from stomplite.frame.frame import Frame

DEFAULT_BUFFER_SIZE = 4096


def _encode(text: str) -> bytes:
    return encode_value(text).encode("utf-8", errors="surrogateescape")


class Writer:
    """Writes STOMP frames to an underlying binary stream."""

    def __init__(self, stream: BinaryIO, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        self._stream = stream
        self._buffer_size = buffer_size if buffer_size > 0 else DEFAULT_BUFFER_SIZE

    def write(self, frame: Frame | None) -> None:
        """Write a frame, or a heart-beat newline when frame is None, and flush."""
        if frame is None:
            data = b"\n"
        else:
            parts = [frame.command.encode("utf-8"), b"\n"]
            if frame.header is not None:
                for key, value in frame.header:
                    parts += [_encode(key), b":", _encode(value), b"\n"]
            parts += [b"\n", bytes(frame.body), b"\x00"]
            data = b"".join(parts)

        view = memoryview(data)
        while view:
            chunk, view = view[: self._buffer_size], view[self._buffer_size :]
            self._stream.write(chunk)

        flush = getattr(self._stream, "flush", None)
        if callable(flush):
            flush()