"""
@file interfaces.py
@brief Abstract base classes for the harness collaborators.

The harness never touches a UI toolkit directly. A live component reaches
the registry as an `IComponent`, and the host application is driven between
test cases through an `IApp`.
"""

from abc import ABC, abstractmethod


class IComponent(ABC):
    """
    Abstract component handle.

    Wraps a live UI component registered under a hook identifier and exposes
    the interactions a test case may perform on it.
    """

    @abstractmethod
    def set_text(self, text: str) -> None:
        """
        Replace the component's text value.

        Args:
            text: Text to fill in
        """
        pass

    @abstractmethod
    def trigger_press(self) -> None:
        """
        Press the component (button, touchable, etc.).
        """
        pass

    @abstractmethod
    def is_present(self) -> bool:
        """
        Check the component is still mounted.

        Returns:
            True if the component is mounted
        """
        pass


class IApp(ABC):
    """
    Abstract application interface used between test cases.

    The runner calls `clear_state` then `force_remount` after every case so
    no state leaks from one case into the next.
    """

    @abstractmethod
    async def clear_state(self) -> None:
        """
        Clear persisted application state.

        Implementations should not raise; the runner still guards the call.
        """
        pass

    @abstractmethod
    def force_remount(self) -> None:
        """
        Force the host UI to rebuild its whole component tree.

        Remounted components re-register fresh handles in the registry.
        """
        pass
