"""Console logger backed by the standard logging module."""

import logging
import sys
from typing import Any, Optional, TextIO, Union

from .base import Logger

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _format_fields(fields: dict) -> str:
    return " ".join(f"{key}={value!r}" for key, value in fields.items())


class ConsoleLogger(Logger):
    """Logger that renders ``message key=value ...`` lines to a stream (stderr by default)."""

    def __init__(
        self,
        name: str = "erpnext_mcp",
        level: Union[int, str] = logging.INFO,
        stream: Optional[TextIO] = None,
    ):
        self._logger = logging.getLogger(name)
        self._logger.propagate = False
        self._handler: Optional[logging.Handler] = None
        if not self._logger.handlers:
            self._handler = logging.StreamHandler(stream or sys.stderr)
            self._handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt="%H:%M:%S"))
            self._logger.addHandler(self._handler)
        self.set_level(level)

    def set_level(self, level: Union[int, str]) -> None:
        if isinstance(level, str):
            resolved = logging.getLevelName(level.upper())
            if not isinstance(resolved, int):
                raise ValueError(f"Unknown log level: {level}")
            level = resolved
        self._logger.setLevel(level)

    def _log(self, level: int, message: str, fields: dict) -> None:
        if not self._logger.isEnabledFor(level):
            return
        if fields:
            message = f"{message} {_format_fields(fields)}"
        self._logger.log(level, message)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log(logging.CRITICAL, message, kwargs)
