"""
hookrunner - In-process UI integration test harness.

Components register under stable hook identifiers; async test cases locate
them by identifier, interact with them and assert on their presence, while
the runner executes the suite sequentially and resets the app between cases.

- Registry: identifier -> live component handle
- Locator: polling lookup with a bounded wait
- Scope: describe/it and interaction primitives
- Runner: sequential execution, failure isolation, per-case reset
- Tester: wires the above for one run
"""

from hookrunner.app import CallbackApp
from hookrunner.components import PropsComponent, wrap
from hookrunner.config import HarnessConfig
from hookrunner.exceptions import (
    HookRunnerError,
    ConfigError,
    RegistrationError,
    ComponentNotFoundError,
    UnexpectedPresenceError,
    SuiteAbortedError,
    CollaboratorError,
)
from hookrunner.hooks import CallbackRef, HookStore, HookTarget, NamedRef, generate_test_hook
from hookrunner.interfaces import IApp, IComponent
from hookrunner.locator import Locator
from hookrunner.registry import Registry
from hookrunner.report import CaseOutcome, SuiteReport
from hookrunner.runner import Runner, RunnerState
from hookrunner.scope import Scope, TestCase
from hookrunner.tester import Tester

__all__ = [
    "CallbackApp",
    "PropsComponent",
    "wrap",
    "HarnessConfig",
    "HookRunnerError",
    "ConfigError",
    "RegistrationError",
    "ComponentNotFoundError",
    "UnexpectedPresenceError",
    "SuiteAbortedError",
    "CollaboratorError",
    "CallbackRef",
    "HookStore",
    "HookTarget",
    "NamedRef",
    "generate_test_hook",
    "IApp",
    "IComponent",
    "Locator",
    "Registry",
    "CaseOutcome",
    "SuiteReport",
    "Runner",
    "RunnerState",
    "Scope",
    "TestCase",
    "Tester",
]

__version__ = "1.0.0"
