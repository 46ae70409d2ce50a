import io

import pytest

from stomplite.frame.frame import Frame, new_frame
from stomplite.frame.reader import Reader
from stomplite.frame.writer import Writer

FRAME_TEXTS = [
    b"CONNECT\nlogin:xxx\npasscode:yyy\n\n\x00",
    b"SEND\n"
    b"destination:/queue/request\n"
    b"tx:1\n"
    b"content-length:5\n"
    b"\n\x00\x01\x02\x03\x04\x00",
    b"SEND\ndestination:x\n\nABCD\x00",
    b"SEND\ndestination:x\ndodgy\\nheader\\c:abc\\n\\c\n\n123456\x00",
]


@pytest.mark.parametrize("frame_text", FRAME_TEXTS)
def test_writes_round_trip(frame_text):
    frame = Reader(io.BytesIO(frame_text)).read()
    assert frame is not None

    out = io.BytesIO()
    Writer(out).write(frame)
    assert out.getvalue() == frame_text


@pytest.mark.parametrize("frame_text", FRAME_TEXTS)
def test_small_buffer_writes_same_bytes(frame_text):
    frame = Reader(io.BytesIO(frame_text)).read()
    out = io.BytesIO()
    Writer(out, 3).write(frame)
    assert out.getvalue() == frame_text


def test_heart_beat():
    out = io.BytesIO()
    Writer(out).write(None)
    assert out.getvalue() == b"\n"


def test_frame_without_header():
    out = io.BytesIO()
    Writer(out).write(Frame(command="DISCONNECT"))
    assert out.getvalue() == b"DISCONNECT\n\n\x00"


def test_written_frame_reads_back():
    frame = new_frame("SEND", "destination", "a:b\nc", "weird\\key", "v")
    frame.body = b"body"
    out = io.BytesIO()
    Writer(out).write(frame)
    back = Reader(io.BytesIO(out.getvalue())).read()
    assert back == frame