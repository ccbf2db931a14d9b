# hookrunner/suitelogger.py
"""
@file suitelogger.py
@brief Line-oriented suite output: banners, pass/fail marks, summary.
"""

from __future__ import annotations

import logging
import os
import sys
import threading
from datetime import datetime
from typing import IO, List, Optional

logger = logging.getLogger(__name__)

PASS_MARK = "✅"
FAIL_MARK = "❌"
SKIP_MARK = "⏭"


def log_file_name(start: datetime) -> str:
    """Timestamp-based log file name, e.g. 20261019_142501.log."""
    return f"{start.strftime('%Y%m%d_%H%M%S')}.log"


class SuiteLogger:
    """
    Writes suite progress lines to a stream and, optionally, a log file.

    The log file is named after the suite start time and placed in log_dir.
    """

    def __init__(self, stream: Optional[IO[str]] = None, log_dir: Optional[str] = None):
        self._lock = threading.Lock()
        self._stream = stream
        self._log_dir = log_dir
        self.file_path: Optional[str] = None
        self.lines: List[str] = []

    def configure_log_dir(self, log_dir: Optional[str]) -> None:
        with self._lock:
            self._log_dir = log_dir

    def open(self, start: datetime) -> None:
        """Prepare the file sink for a suite started at `start`."""
        if not self._log_dir:
            return
        try:
            os.makedirs(self._log_dir, exist_ok=True)
        except OSError as e:
            logger.warning("Cannot create suite log directory %s: %s", self._log_dir, e)
            return
        self.file_path = os.path.join(self._log_dir, log_file_name(start))

    def write(self, line: str) -> None:
        with self._lock:
            self.lines.append(line)
            stream = self._stream if self._stream is not None else sys.stdout
            print(line, file=stream, flush=True)
            if self.file_path:
                self._write_file(line)

    def _write_file(self, line: str) -> None:
        try:
            with open(self.file_path, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError as e:
            logger.warning("Cannot write suite log %s: %s", self.file_path, e)
            self.file_path = None

    def started(self, start: datetime) -> None:
        self.write(f"Test suite started at {start.isoformat(sep=' ', timespec='seconds')}.")

    def passed(self, description: str) -> None:
        self.write(f"{description}  {PASS_MARK}")

    def failed(self, description: str, message: str) -> None:
        indented = "\n".join(f"    {part}" for part in message.splitlines() or [""])
        self.write(f"{description}  {FAIL_MARK}\n{indented}")

    def skipped(self, description: str) -> None:
        self.write(f"{description}  {SKIP_MARK} skipped")

    def stopped(self, stop: datetime, duration: float, passed: int, failed: int, skipped: int) -> None:
        summary = f"{passed} passed, {failed} failed"
        if skipped:
            summary += f", {skipped} skipped"
        self.write(
            f"Test suite stopped at {stop.isoformat(sep=' ', timespec='seconds')}, "
            f"duration: {duration:.3f} seconds. {summary}."
        )
