# hookrunner/scope.py
"""
@file scope.py
@brief Test authoring surface: grouping, case registration and interactions.

A spec function receives the scope and declares its cases:

    def login_spec(spec):
        @spec.describe("Login")
        def _(spec):
            @spec.it("accepts a username")
            async def _(spec):
                await spec.fill_in("Login.username", "alice")
                await spec.press("Login.submit")
                await spec.exists("Home.greeting")
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Tuple

from .exceptions import ComponentNotFoundError, RegistrationError, UnexpectedPresenceError
from .locator import Locator

CaseAction = Callable[["Scope"], Awaitable[None]]
BuildFn = Callable[["Scope"], Any]


@dataclass(frozen=True)
class TestCase:
    """One registered case; consumed in registration order by the runner."""
    __test__ = False

    description: str
    action: CaseAction


class Scope:
    """
    Holds the cases declared by spec functions and the primitives they use.

    Every interaction resolves its component through the locator, so each
    call may wait up to `wait_time` seconds for the component to mount.
    """

    def __init__(self, locator: Locator, abort: Optional[asyncio.Event] = None):
        self.locator = locator
        self.abort_event = abort
        self.describe_label: Optional[str] = None
        self.locked = False
        self._cases: list = []

    @property
    def wait_time(self) -> float:
        return self.locator.default_timeout

    @property
    def registry(self):
        return self.locator.registry

    @property
    def test_cases(self) -> Tuple[TestCase, ...]:
        return tuple(self._cases)

    # -------------------------
    # Registration
    # -------------------------

    def describe(self, label: str, build_fn: Optional[BuildFn] = None):
        """
        Group the cases declared inside build_fn under label.

        build_fn is called immediately with the scope; case bodies are not run.
        Without build_fn, returns a decorator.
        """
        if build_fn is None:
            def decorator(fn: BuildFn) -> BuildFn:
                self.describe(label, fn)
                return fn
            return decorator

        previous = self.describe_label
        self.describe_label = label
        try:
            build_fn(self)
        finally:
            self.describe_label = previous
        return None

    def it(self, label: str, action: Optional[CaseAction] = None):
        """
        Declare a case. The description combines the current group label and label.

        Without action, returns a decorator.
        """
        if action is None:
            def decorator(fn: CaseAction) -> CaseAction:
                self.it(label, fn)
                return fn
            return decorator

        if self.locked:
            raise RegistrationError(f"Cannot register '{label}' while the suite is running")
        if not callable(action):
            raise RegistrationError(f"Action for '{label}' must be callable")

        if self.describe_label is None:
            description = label
        else:
            description = f"{self.describe_label}: {label}"
        self._cases.append(TestCase(description=description, action=action))
        return None

    # -------------------------
    # Interactions
    # -------------------------

    async def find_component(self, identifier: str, timeout: Optional[float] = None) -> Any:
        """
        Find a component by hook identifier, waiting up to wait_time.

        Usually `exists` reads better in a test case.
        """
        return await self.locator.find(identifier, timeout=timeout, abort=self.abort_event)

    async def fill_in(self, identifier: str, text: str) -> None:
        """Fill in a text component."""
        component = await self.find_component(identifier)
        component.set_text(text)

    async def press(self, identifier: str) -> None:
        """Press a component."""
        component = await self.find_component(identifier)
        component.trigger_press()

    async def pause(self, seconds: float) -> None:
        """Suspend the current case, e.g. to let a response arrive."""
        await asyncio.sleep(seconds)

    async def exists(self, identifier: str) -> bool:
        """Return True once the component is found; ComponentNotFoundError propagates."""
        component = await self.find_component(identifier)
        return component is not None

    async def not_exists(self, identifier: str) -> bool:
        """
        Check a component is absent.

        Waits the full wait_time before concluding absence, making this the
        slowest primitive.
        """
        try:
            await self.find_component(identifier)
        except ComponentNotFoundError:
            return True
        raise UnexpectedPresenceError(identifier)
