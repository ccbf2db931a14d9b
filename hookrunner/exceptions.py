# hookrunner/exceptions.py
"""
@file exceptions.py
@brief Custom exception classes for the hook test harness.
"""

from __future__ import annotations

from typing import Optional


class HookRunnerError(Exception):
    """Base exception for the harness."""
    pass


class ConfigError(HookRunnerError):
    """Raised when YAML configuration or a setting value is invalid."""
    pass


class RegistrationError(HookRunnerError):
    """Raised when a hook or test case cannot be registered."""
    pass


class ComponentNotFoundError(HookRunnerError):
    """
    Raised when a component never appears in the registry within the wait window.

    This is an expected, recoverable failure: `Scope.not_exists` relies on it
    as a signal.

    Attributes:
        identifier: The hook identifier that was looked up
        timeout: The wait window in seconds
        attempt_count: Number of registry checks made
        elapsed_time: Actual elapsed time in seconds
    """

    def __init__(
        self,
        identifier: str,
        timeout: Optional[float] = None,
        attempt_count: Optional[int] = None,
        elapsed_time: Optional[float] = None,
    ):
        self.identifier = identifier
        self.timeout = timeout
        self.attempt_count = attempt_count
        self.elapsed_time = elapsed_time
        super().__init__(f"Could not find component with identifier {identifier}")

    def __str__(self) -> str:
        base_msg = super().__str__()

        details = []
        if self.timeout is not None:
            details.append(f"Timeout: {self.timeout}s")
        if self.attempt_count is not None:
            details.append(f"Attempts: {self.attempt_count}")
        if self.elapsed_time is not None:
            details.append(f"Elapsed: {self.elapsed_time:.2f}s")

        if details:
            return f"{base_msg} [{', '.join(details)}]"
        return base_msg


class UnexpectedPresenceError(HookRunnerError):
    """Raised by `not_exists` when the component was found."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Component with identifier {identifier} was present")


class SuiteAbortedError(HookRunnerError):
    """Raised inside a pending component lookup when the suite is aborted."""

    def __init__(self, identifier: Optional[str] = None):
        self.identifier = identifier
        msg = "Test suite was aborted"
        if identifier:
            msg += f" while waiting for component '{identifier}'"
        super().__init__(msg)


class CollaboratorError(HookRunnerError):
    """
    Wraps a failure of the app reset or remount collaborator.

    Never reaches a test case; the runner logs it as a warning and continues.
    """

    def __init__(self, collaborator: str, cause: BaseException):
        self.collaborator = collaborator
        self.cause = cause
        super().__init__(self.__str__())

    def __str__(self) -> str:
        return (
            f"CollaboratorError: collaborator='{self.collaborator}' "
            f"cause='{type(self.cause).__name__}: {self.cause}'"
        )

    def get_cause_traceback(self) -> str:
        """
        Get a formatted traceback string from the cause exception.

        @return Formatted traceback string
        """
        import traceback
        return "".join(traceback.format_exception(
            type(self.cause),
            self.cause,
            self.cause.__traceback__
        ))
