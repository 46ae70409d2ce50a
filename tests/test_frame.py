import pytest

from stomplite.frame.frame import Frame, new_frame
from stomplite.frame.header import Header


def test_new():
    f = new_frame("CCC")
    assert len(f.header) == 0
    assert f.command == "CCC"

    f = new_frame("DDDD", "abc", "def")
    assert len(f.header) == 1
    assert f.header.get_at(0) == ("abc", "def")
    assert f.command == "DDDD"

    f = new_frame("EEEEEEE", "abc", "def", "hij", "klm")
    assert f.command == "EEEEEEE"
    assert len(f.header) == 2
    assert f.header.get_at(0) == ("abc", "def")
    assert f.header.get_at(1) == ("hij", "klm")


def test_new_odd_arguments():
    with pytest.raises(ValueError):
        new_frame("SEND", "destination")


def test_clone():
    f1 = Frame(command="AAAA")
    f2 = f1.clone()
    assert f2.command == f1.command
    assert f2.header is None
    assert f2.body == b""

    f1.header = Header("aaa", "1", "bbb", "2", "ccc", "3")
    f2 = f1.clone()
    assert len(f2.header) == len(f1.header)
    assert list(f2.header) == list(f1.header)

    f1.body = bytes([1, 2, 3, 4, 5, 6, 5, 4, 77, 88, 99, 0xAA, 0xBB, 0xCC, 0xFF])
    f2 = f1.clone()
    assert f2.body == f1.body


def test_clone_header_is_independent():
    f1 = new_frame("SEND", "destination", "/queue/a")
    f2 = f1.clone()
    f1.header.set("destination", "/queue/b")
    assert f2.header.get("destination") == "/queue/a"