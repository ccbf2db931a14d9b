# hookrunner/runner.py
"""
@file runner.py
@brief Sequential suite runner with per-case app reset.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import time
from datetime import datetime
from enum import Enum, auto
from typing import Optional
from uuid import uuid4

from .exceptions import CollaboratorError, SuiteAbortedError
from .interfaces import IApp
from .locator import abortable_sleep
from .report import FAILED, PASSED, SKIPPED, CaseOutcome, SuiteReport
from .scope import Scope, TestCase
from .suitelogger import SuiteLogger

logger = logging.getLogger(__name__)


class RunnerState(Enum):
    """Lifecycle of a runner."""
    NOT_STARTED = auto()
    RUNNING = auto()
    FINISHED = auto()


def _error_message(error: BaseException) -> str:
    message = str(error)
    if not message:
        return type(error).__name__
    return message


class Runner:
    """
    Runs the scope's cases one after the other.

    A failing case is recorded and never stops the suite. After every case,
    pass or fail, the app state is cleared and the component tree remounted.
    """

    def __init__(
        self,
        scope: Scope,
        app: IApp,
        start_delay: float = 0.0,
        suite_logger: Optional[SuiteLogger] = None,
        report_path: Optional[str] = None,
    ):
        """
        @param scope Scope holding the registered cases
        @param app Reset/remount collaborator
        @param start_delay Seconds to wait before the first case
        @param suite_logger Output sink, defaults to stdout
        @param report_path Optional JSON report output path
        """
        self.scope = scope
        self.app = app
        self.start_delay = start_delay
        self.suite_logger = suite_logger or SuiteLogger()
        self.report_path = report_path
        self.state = RunnerState.NOT_STARTED
        self.report = SuiteReport(run_id=str(uuid4()))

        if scope.abort_event is None:
            scope.abort_event = asyncio.Event()
        self._abort = scope.abort_event

    @property
    def aborted(self) -> bool:
        return self._abort.is_set()

    def abort(self) -> None:
        """Stop after the current case; a pending component lookup ends at once."""
        if not self._abort.is_set():
            logger.info("Test suite abort requested")
        self._abort.set()

    async def run(self) -> SuiteReport:
        if self.state is not RunnerState.NOT_STARTED:
            raise RuntimeError(f"Runner cannot run twice (state: {self.state.name})")
        self.state = RunnerState.RUNNING
        self.scope.locked = True
        cases = self.scope.test_cases

        try:
            if self.start_delay and not self.aborted:
                await abortable_sleep(self.start_delay, self._abort)

            start = datetime.now()
            start_ts = time.monotonic()
            self.report.started_at = start
            self.suite_logger.open(start)
            self.suite_logger.started(start)

            for idx, case in enumerate(cases, start=1):
                if self.aborted:
                    self._skip(idx, case)
                    continue
                await self._run_case(idx, case)
                await self._reset_app()

            stop = datetime.now()
            self.report.stopped_at = stop
            self.report.duration_sec = round(time.monotonic() - start_ts, 3)
            self.suite_logger.stopped(
                stop,
                self.report.duration_sec,
                passed=self.report.passed,
                failed=self.report.failed,
                skipped=self.report.skipped,
            )
        finally:
            self.state = RunnerState.FINISHED
            self.scope.locked = False

        if self.report_path:
            self.report.write_json(self.report_path)
        return self.report

    async def _run_case(self, idx: int, case: TestCase) -> None:
        started = time.monotonic()
        try:
            result = case.action(self.scope)
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            message = _error_message(e)
            if isinstance(e, SuiteAbortedError):
                logger.info("Case '%s' interrupted by abort", case.description)
            outcome = CaseOutcome(
                index=idx,
                description=case.description,
                status=FAILED,
                error=message,
                duration_sec=round(time.monotonic() - started, 3),
            )
            self.report.outcomes.append(outcome)
            self.suite_logger.failed(case.description, message)
            return

        self.report.outcomes.append(CaseOutcome(
            index=idx,
            description=case.description,
            status=PASSED,
            duration_sec=round(time.monotonic() - started, 3),
        ))
        self.suite_logger.passed(case.description)

    def _skip(self, idx: int, case: TestCase) -> None:
        self.report.outcomes.append(CaseOutcome(index=idx, description=case.description, status=SKIPPED))
        self.suite_logger.skipped(case.description)

    async def _reset_app(self) -> None:
        """Clear state then remount. Collaborator failures are logged, never raised."""
        try:
            await self.app.clear_state()
        except Exception as e:
            logger.warning("%s", CollaboratorError("clear_state", e))

        try:
            self.app.force_remount()
        except Exception as e:
            logger.warning("%s", CollaboratorError("force_remount", e))
