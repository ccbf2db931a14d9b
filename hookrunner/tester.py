# hookrunner/tester.py
"""
@file tester.py
@brief Entry point wiring the registry, spec functions and runner together.

Example

    from hookrunner import CallbackApp, HarnessConfig, Tester

    tester = Tester(
        app=CallbackApp(remount=root.rebuild),
        specs=[login_spec, settings_spec],
        config=HarnessConfig(default_timeout=3.0),
    )
    root.hooks = tester.hooks          # components call tester.hooks.hook(...)
    report = asyncio.run(tester.run_tests())
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, Optional, Sequence

from .app import CallbackApp
from .config import HarnessConfig
from .hooks import HookStore
from .interfaces import IApp
from .locator import Locator
from .registry import Registry
from .report import SuiteReport
from .runner import Runner
from .scope import Scope
from .suitelogger import SuiteLogger

SpecFn = Callable[[Scope], Any]


class Tester:
    """
    Owns the registry of one test run and drives the suite.

    app      - Reset/remount collaborator.
    specs    - Spec functions, each given the scope to declare cases on.
    registry - Registry fed by mounted components; a fresh one by default.
    config   - Timing and output settings.
    """
    __test__ = False

    def __init__(
        self,
        app: IApp,
        specs: Sequence[SpecFn],
        registry: Optional[Registry] = None,
        config: Optional[HarnessConfig] = None,
        suite_logger: Optional[SuiteLogger] = None,
    ):
        self.app = app
        self.specs = list(specs)
        self.registry = registry if registry is not None else Registry()
        self.config = config or HarnessConfig()
        self.hooks = HookStore(self.registry)
        self.suite_logger = suite_logger or SuiteLogger(log_dir=self.config.log_dir)
        self.runner: Optional[Runner] = None

    @classmethod
    def from_callbacks(
        cls,
        remount: Callable[[], Any],
        specs: Sequence[SpecFn],
        clear_storage: Optional[Callable[[], Any]] = None,
        config: Optional[HarnessConfig] = None,
        registry: Optional[Registry] = None,
    ) -> Tester:
        """Build a tester whose app is a CallbackApp; storage is cleared if config.clear_state."""
        config = config or HarnessConfig()
        app = CallbackApp(remount, clear_storage=clear_storage, clear_state=config.clear_state)
        return cls(app, specs, registry=registry, config=config)

    def apply_config(self, config: HarnessConfig) -> None:
        """Swap in a new config, including the storage-clear switch of a CallbackApp."""
        self.config = config
        self.suite_logger.configure_log_dir(config.log_dir)
        if isinstance(self.app, CallbackApp):
            self.app.clear_state_enabled = config.clear_state

    def build_scope(self) -> Scope:
        locator = Locator(
            self.registry,
            poll_interval=self.config.poll_interval,
            default_timeout=self.config.default_timeout,
        )
        return Scope(locator)

    async def load_specs(self, scope: Scope) -> None:
        """Run every spec function in order. Errors here are not caught."""
        for spec in self.specs:
            result = spec(scope)
            if inspect.isawaitable(result):
                await result

    async def run_tests(self) -> SuiteReport:
        scope = self.build_scope()
        await self.load_specs(scope)
        self.runner = Runner(
            scope,
            self.app,
            start_delay=self.config.start_delay,
            suite_logger=self.suite_logger,
            report_path=self.config.report_path,
        )
        return await self.runner.run()

    def abort(self) -> None:
        if self.runner is not None:
            self.runner.abort()
