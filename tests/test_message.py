from types import SimpleNamespace

import pytest

from stomplite.ack import AckMode
from stomplite.message import Message


def test_should_ack_without_subscription():
    assert Message(body=b"x").should_ack() is False


@pytest.mark.parametrize("mode", list(AckMode))
def test_should_ack_follows_subscription(mode):
    message = Message(subscription=SimpleNamespace(ack_mode=mode))
    assert message.should_ack() is mode.should_ack()


def test_read_in_chunks_reassembles_body():
    body = b"Message body 1"
    message = Message(body=body)
    chunks = []
    while chunk := message.read(4):
        assert len(chunk) <= 4
        chunks.append(chunk)
    assert b"".join(chunks) == body
    assert message.read() == b""


def test_read_all():
    message = Message(body=b"abcdef")
    assert message.read(3) == b"abc"
    assert message.read() == b"def"
    assert message.body == b""


def test_read_byte_consumes_body():
    body = b"AB"
    message = Message(body=body)
    assert message.read_byte() == body[0]
    assert message.read_byte() == body[1]
    with pytest.raises(EOFError):
        message.read_byte()