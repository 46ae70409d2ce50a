import logging

import pytest

from stomplite.logger import Logger, StdLogger


def test_infof_formats_with_prefix(caplog):
    caplog.set_level(logging.DEBUG, logger="stomplite")
    StdLogger().infof("ignored MESSAGE for subscription: %s", "7")
    assert [r.getMessage() for r in caplog.records] == [
        "INFO: ignored MESSAGE for subscription: 7"
    ]
    assert caplog.records[0].levelno == logging.INFO


def test_error_message_is_not_formatted(caplog):
    caplog.set_level(logging.DEBUG, logger="stomplite")
    StdLogger().error("received ERROR; 100%s done")
    assert caplog.records[0].getMessage() == "ERROR: received ERROR; 100%s done"
    assert caplog.records[0].levelno == logging.ERROR


@pytest.mark.parametrize(
    "method, prefix, level",
    [
        ("debug", "DEBUG: ", logging.DEBUG),
        ("info", "INFO: ", logging.INFO),
        ("warning", "WARN: ", logging.WARNING),
        ("error", "ERROR: ", logging.ERROR),
    ],
)
def test_plain_and_formatted_methods(caplog, method, prefix, level):
    caplog.set_level(logging.DEBUG, logger="stomplite")
    logger = StdLogger()
    getattr(logger, method)("plain")
    getattr(logger, method + "f")("n=%d", 3)
    messages = [r.getMessage() for r in caplog.records]
    assert messages == [prefix + "plain", prefix + "n=3"]
    assert all(r.levelno == level for r in caplog.records)


def test_custom_logger_name(caplog):
    caplog.set_level(logging.DEBUG, logger="custom")
    StdLogger(name="custom").warning("careful")
    assert caplog.records[0].name == "custom"
    assert isinstance(StdLogger(), Logger) and caplog.records[0].getMessage() == "WARN: careful"