"""Reading STOMP frames from a binary stream."""

from __future__ import annotations

from typing import BinaryIO

from stomplite.frame.codec import unencode_value
from stomplite.frame.constants import COMMANDS
from stomplite.frame.frame import Frame
from stomplite.frame.header import Header

DEFAULT_BUFFER_SIZE = 4096
_MIN_BUFFER_SIZE = 16


class InvalidCommandError(ValueError):
    """The frame starts with a command that STOMP does not define."""

    def __init__(self, message: str = "invalid command") -> None:
        super().__init__(message)


class InvalidFrameFormatError(ValueError):
    """The frame is not laid out as STOMP requires."""

    def __init__(self, message: str = "invalid frame format") -> None:
        super().__init__(message)


class Reader:
    """Reads STOMP frames from an underlying binary stream.

    ``read`` raises EOFError once the stream is exhausted.
    """

    def __init__(self, stream: BinaryIO, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        self._stream = stream
        self._buffer_size = max(buffer_size, _MIN_BUFFER_SIZE)
        self._buffer = bytearray()
        read1 = getattr(stream, "read1", None)
        self._read_chunk = read1 if callable(read1) else stream.read

    def read(self) -> Frame | None:
        """Read the next frame; return None for a heart-beat."""
        command_line = self._read_line()
        if not command_line:
            return None

        command = command_line.decode("utf-8", errors="surrogateescape")
        if command not in COMMANDS:
            raise InvalidCommandError()

        header = Header()
        while line := self._read_line():
            index = line.find(b":")
            if index <= 0:
                raise InvalidFrameFormatError()
            header.add(unencode_value(line[:index]), unencode_value(line[index + 1 :]))

        length = header.content_length()
        if length is not None:
            body = self._read_exact(length)
            if self._read_exact(1) != b"\x00":
                raise InvalidFrameFormatError()
        else:
            body = self._read_until(b"\x00")[:-1]

        return Frame(command=command, header=header, body=body)

    def _fill(self) -> None:
        chunk = self._read_chunk(self._buffer_size)
        if not chunk:
            raise EOFError("end of input")
        self._buffer += chunk

    def _read_until(self, delimiter: bytes) -> bytes:
        search_from = 0
        while (index := self._buffer.find(delimiter, search_from)) < 0:
            search_from = len(self._buffer)
            self._fill()
        end = index + len(delimiter)
        data = bytes(self._buffer[:end])
        del self._buffer[:end]
        return data

    def _read_exact(self, count: int) -> bytes:
        while len(self._buffer) < count:
            self._fill()
        data = bytes(self._buffer[:count])
        del self._buffer[:count]
        return data

    def _read_line(self) -> bytes:
        line = self._read_until(b"\n")
        if line.endswith(b"\r\n"):
            return line[:-2]
        return line[:-1]