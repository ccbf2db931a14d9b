# hookrunner/timinglogger.py
"""
@file timinglogger.py
@brief Component lookup timing events on the `hookrunner.timing` logger.

Events are only built when timing logging is enabled, so polling stays
cheap in normal runs. Output goes through stdlib logging handlers attached
by `configure`.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, List, Optional

logger = logging.getLogger(__name__)

TIMING_LOGGER_NAME = "hookrunner.timing"

_FORMAT = "[%(levelname)s] [timing] time=%(asctime)s %(message)s"
_DATE_FORMAT = "%H:%M:%S"


def _format_fields(**fields: Any) -> str:
    return " ".join(f"{key}={value}" for key, value in fields.items() if value is not None)


class LookupTimingLogger:
    """Reports the start, success and timeout of each component lookup."""

    def __init__(self, name: str = TIMING_LOGGER_NAME) -> None:
        self._logger = logging.getLogger(name)
        self._logger.propagate = False
        self._handlers: List[logging.Handler] = []
        self._enabled = False

    @property
    def handlers(self) -> List[logging.Handler]:
        return list(self._handlers)

    def configure(self, *, console: bool = True, file_path: Optional[str] = None) -> None:
        """Replace the attached handlers with a console and/or file handler."""
        self._close_handlers()
        formatter = logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT)

        if console:
            self._attach(logging.StreamHandler(sys.stdout), formatter)

        if file_path:
            try:
                handler = logging.FileHandler(file_path, encoding="utf-8")
            except OSError as e:
                logger.warning("Cannot open timing log file %s: %s", file_path, e)
            else:
                self._attach(handler, formatter)

        self._logger.setLevel(logging.INFO)

    def _attach(self, handler: logging.Handler, formatter: logging.Formatter) -> None:
        handler.setFormatter(formatter)
        self._logger.addHandler(handler)
        self._handlers.append(handler)

    def _close_handlers(self) -> None:
        for handler in self._handlers:
            self._logger.removeHandler(handler)
            handler.close()
        self._handlers = []

    def enable(self) -> None:
        self._enabled = True

    def disable(self) -> None:
        self._enabled = False

    def is_enabled(self) -> bool:
        return self._enabled

    def find_started(self, identifier: str, timeout: float, interval: float) -> None:
        if self._enabled:
            self._logger.info(
                "%s",
                _format_fields(event="find_start", identifier=identifier,
                               timeout_s=timeout, interval_s=interval),
            )

    def find_succeeded(self, identifier: str, attempts: int, elapsed: float) -> None:
        if self._enabled:
            self._logger.info(
                "%s",
                _format_fields(event="find_success", identifier=identifier,
                               attempts=attempts, elapsed_s=round(elapsed, 3)),
            )

    def find_timed_out(self, identifier: str, timeout: float, attempts: int, elapsed: float) -> None:
        if self._enabled:
            self._logger.warning(
                "%s",
                _format_fields(event="find_timeout", identifier=identifier, timeout_s=timeout,
                               attempts=attempts, elapsed_s=round(elapsed, 3)),
            )


TIMING_LOGGER = LookupTimingLogger()
