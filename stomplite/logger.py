"""The logging interface used by connections, and its default implementation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Logger(Protocol):
    """What a connection needs from a logger."""

    def debugf(self, format: str, *args: Any) -> None: ...

    def infof(self, format: str, *args: Any) -> None: ...

    def warningf(self, format: str, *args: Any) -> None: ...

    def errorf(self, format: str, *args: Any) -> None: ...

    def debug(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


_DEBUG_PREFIX = "DEBUG: "
_INFO_PREFIX = "INFO: "
_WARN_PREFIX = "WARN: "
_ERROR_PREFIX = "ERROR: "


@dataclass
class StdLogger:
    """Logger that writes through the standard logging module.

    Format strings use %-style placeholders.
    """

    name: str = "stomplite"

    def _log(self, level: int, prefix: str, format: str, *args: Any) -> None:
        logging.getLogger(self.name).log(level, prefix + format, *args, stacklevel=3)

    def debugf(self, format: str, *args: Any) -> None:
        self._log(logging.DEBUG, _DEBUG_PREFIX, format, *args)

    def debug(self, message: str) -> None:
        self._log(logging.DEBUG, _DEBUG_PREFIX, "%s", message)

    def infof(self, format: str, *args: Any) -> None:
        self._log(logging.INFO, _INFO_PREFIX, format, *args)

    def info(self, message: str) -> None:
        self._log(logging.INFO, _INFO_PREFIX, "%s", message)

    def warningf(self, format: str, *args: Any) -> None:
        self._log(logging.WARNING, _WARN_PREFIX, format, *args)

    def warning(self, message: str) -> None:
        self._log(logging.WARNING, _WARN_PREFIX, "%s", message)

    def errorf(self, format: str, *args: Any) -> None:
        self._log(logging.ERROR, _ERROR_PREFIX, format, *args)

    def error(self, message: str) -> None:
        self._log(logging.ERROR, _ERROR_PREFIX, "%s", message)