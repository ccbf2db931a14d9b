"""
Test doubles shared by the test modules.
"""

from hookrunner.interfaces import IApp, IComponent


class FakeComponent(IComponent):
    """Records interactions."""

    def __init__(self, name="component"):
        self.name = name
        self.texts = []
        self.presses = 0
        self.mounted = True

    def set_text(self, text):
        self.texts.append(text)

    def trigger_press(self):
        self.presses += 1

    def is_present(self):
        return self.mounted

    def __repr__(self):
        return f"FakeComponent({self.name!r})"


class FakeApp(IApp):
    """Records reset/remount calls in order."""

    def __init__(self, clear_error=None, remount_error=None):
        self.calls = []
        self.clear_error = clear_error
        self.remount_error = remount_error

    async def clear_state(self):
        self.calls.append("clear_state")
        if self.clear_error is not None:
            raise self.clear_error

    def force_remount(self):
        self.calls.append("force_remount")
        if self.remount_error is not None:
            raise self.remount_error

    @property
    def resets(self):
        return self.calls.count("force_remount")
