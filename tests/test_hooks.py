# tests/test_hooks.py
"""
Tests for mount-side hook helpers and component adapters.
"""

import pytest

from hookrunner.components import PropsComponent, wrap
from hookrunner.hooks import CallbackRef, HookStore, NamedRef, generate_test_hook
from hookrunner.registry import Registry

from fakes import FakeComponent


class TestGenerateTestHook:
    """Tests for generate_test_hook."""

    def test_mount_registers_and_unmount_removes(self):
        registry = Registry()
        ref = generate_test_hook(registry, "Login.submit")
        button = FakeComponent()

        ref(button)
        assert registry.get("Login.submit") is button

        ref(None)
        assert registry.get("Login.submit") is None

    def test_stale_unmount_keeps_remounted_handle(self):
        registry = Registry()
        old_ref = generate_test_hook(registry, "x")
        new_ref = generate_test_hook(registry, "x")
        old, new = FakeComponent("old"), FakeComponent("new")

        old_ref(old)
        new_ref(new)
        old_ref(None)
        assert registry.get("x") is new

    def test_named_ref_target(self):
        registry = Registry()
        refs = {}
        ref = generate_test_hook(registry, "x", target=NamedRef("input", refs))
        field = FakeComponent()

        ref(field)
        assert refs == {"input": field}
        ref(None)
        assert refs == {}

    def test_callback_ref_target(self):
        registry = Registry()
        received = []
        ref = generate_test_hook(registry, "x", target=CallbackRef(received.append))
        field = FakeComponent()

        ref(field)
        ref(None)
        assert received == [field, None]

    def test_disabled_without_target_returns_none(self):
        assert generate_test_hook(Registry(), "x", enabled=False) is None

    def test_disabled_with_target_only_forwards(self):
        registry = Registry()
        received = []
        ref = generate_test_hook(registry, "x", target=CallbackRef(received.append), enabled=False)
        field = FakeComponent()

        ref(field)
        assert received == [field]
        assert registry.get("x") is None


class TestHookStore:
    """Tests for HookStore."""

    def test_hook_feeds_store_registry(self):
        store = HookStore(Registry())
        button = FakeComponent()
        store.hook("x")(button)
        assert store.registry.get("x") is button

    def test_disabled_store(self):
        assert HookStore(Registry(), enabled=False).hook("x") is None


class TestComponents:
    """Tests for props-driven component adapters."""

    def test_props_component_callbacks(self):
        texts, presses = [], []
        component = PropsComponent({"on_change_text": texts.append, "on_press": lambda: presses.append(1)})
        component.set_text("hello")
        component.trigger_press()
        assert texts == ["hello"]
        assert presses == [1]
        assert component.is_present() is True

    def test_missing_prop(self):
        component = PropsComponent({})
        with pytest.raises(TypeError, match="on_press"):
            component.trigger_press()

    def test_is_mounted_callable(self):
        component = PropsComponent({}, is_mounted=lambda: False)
        assert component.is_present() is False

    def test_wrap_variants(self):
        fake = FakeComponent()
        assert wrap(fake) is fake
        assert isinstance(wrap({"on_press": lambda: None}), PropsComponent)

        class Widget:
            props = {"on_press": lambda: None}

        assert isinstance(wrap(Widget()), PropsComponent)

    def test_wrap_rejects_unknown(self):
        with pytest.raises(TypeError):
            wrap(42)
