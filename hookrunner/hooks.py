# hookrunner/hooks.py
"""
@file hooks.py
@brief Mount-side helpers that feed component handles into the registry.

A UI toolkit calls a ref callback with the component when it mounts and
with None when it unmounts. `generate_test_hook` builds such a callback for
one identifier, optionally forwarding the handle to the component's own
ref target.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, MutableMapping, Optional, Union

from .registry import Registry

logger = logging.getLogger(__name__)

RefCallback = Callable[[Optional[Any]], None]


@dataclass(frozen=True)
class NamedRef:
    """Store the handle under `name` in a caller-owned refs mapping."""
    name: str
    refs: MutableMapping[str, Any]

    def deliver(self, handle: Optional[Any]) -> None:
        if handle is None:
            self.refs.pop(self.name, None)
        else:
            self.refs[self.name] = handle


@dataclass(frozen=True)
class CallbackRef:
    """Forward the handle (or None on unmount) to a callable."""
    callback: Callable[[Optional[Any]], None]

    def deliver(self, handle: Optional[Any]) -> None:
        self.callback(handle)


HookTarget = Union[NamedRef, CallbackRef]


def generate_test_hook(
    registry: Registry,
    identifier: str,
    target: Optional[HookTarget] = None,
    enabled: bool = True,
) -> Optional[RefCallback]:
    """
    Build a ref callback registering a component under identifier.

    @param registry Registry of the current test run
    @param identifier Hook identifier used by test cases
    @param target Optional ref target the component itself needs
    @param enabled False outside integration testing: only target is served
    @return Ref callback, or None when disabled and there is no target
    """
    if not enabled and target is None:
        return None

    state = {"handle": None}

    def ref(handle: Optional[Any]) -> None:
        if target is not None:
            target.deliver(handle)
        if not enabled:
            return
        if handle is None:
            if state["handle"] is not None:
                registry.remove(identifier, state["handle"])
                logger.debug("Hook '%s' unmounted", identifier)
            state["handle"] = None
            return
        registry.register(identifier, handle)
        state["handle"] = handle
        logger.debug("Hook '%s' mounted", identifier)

    return ref


class HookStore:
    """Hands out ref callbacks bound to one registry."""

    def __init__(self, registry: Registry, enabled: bool = True):
        self.registry = registry
        self.enabled = enabled

    def hook(self, identifier: str, target: Optional[HookTarget] = None) -> Optional[RefCallback]:
        return generate_test_hook(self.registry, identifier, target=target, enabled=self.enabled)
