# hookrunner/locator.py
"""
@file locator.py
@brief Polling lookup of hook identifiers in the registry.
"""

from __future__ import annotations

import asyncio
import time
from typing import Any, Optional

from .exceptions import ComponentNotFoundError, SuiteAbortedError
from .registry import Registry
from .timinglogger import TIMING_LOGGER


def _now() -> float:
    """Monotonic time source for deterministic timeout calculations."""
    return time.monotonic()


async def abortable_sleep(delay: float, abort: Optional[asyncio.Event]) -> bool:
    """Sleep for delay seconds. Returns True as soon as abort is set."""
    if abort is None:
        await asyncio.sleep(delay)
        return False
    if abort.is_set():
        return True
    try:
        await asyncio.wait_for(abort.wait(), timeout=delay)
    except asyncio.TimeoutError:
        return False
    return True


class Locator:
    """
    Resolves identifiers to component handles, waiting for them to mount.

    The registry is checked once immediately, then every `poll_interval`
    seconds until the handle shows up or `timeout` seconds have elapsed.
    Sleeps are clamped to the time left, so a miss is reported no later than
    one poll interval after the deadline.
    """

    def __init__(self, registry: Registry, poll_interval: float = 0.1, default_timeout: float = 2.0):
        if poll_interval <= 0:
            raise ValueError(f"poll_interval must be positive, got: {poll_interval}")
        self.registry = registry
        self.poll_interval = poll_interval
        self.default_timeout = default_timeout

    async def find(
        self,
        identifier: str,
        timeout: Optional[float] = None,
        abort: Optional[asyncio.Event] = None,
    ) -> Any:
        """
        Wait for identifier to be registered and return its handle.

        @param identifier Hook identifier
        @param timeout Wait window in seconds, defaults to default_timeout
        @param abort Optional event; once set the wait stops with SuiteAbortedError
        @raise ComponentNotFoundError if nothing is registered within the window
        """
        timeout = self.default_timeout if timeout is None else timeout
        start_time = _now()
        deadline = start_time + timeout
        attempt_count = 0

        TIMING_LOGGER.find_started(identifier, timeout, self.poll_interval)

        while True:
            attempt_count += 1
            handle = self.registry.get(identifier)
            if handle is not None:
                TIMING_LOGGER.find_succeeded(identifier, attempt_count, _now() - start_time)
                return handle

            time_left = deadline - _now()
            if time_left <= 0:
                break

            if await abortable_sleep(min(self.poll_interval, time_left), abort):
                raise SuiteAbortedError(identifier)

        elapsed = _now() - start_time
        TIMING_LOGGER.find_timed_out(identifier, timeout, attempt_count, elapsed)
        raise ComponentNotFoundError(
            identifier,
            timeout=timeout,
            attempt_count=attempt_count,
            elapsed_time=elapsed,
        )
