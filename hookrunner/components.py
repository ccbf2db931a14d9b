# hookrunner/components.py
"""
@file components.py
@brief Adapters exposing toolkit components as IComponent handles.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Optional

from .interfaces import IComponent


class PropsComponent(IComponent):
    """
    Component handle driven through callback props.

    Text inputs are expected to expose `on_change_text`, pressables
    `on_press`. An optional `is_mounted` callable reports presence.
    """

    def __init__(self, props: Mapping, is_mounted: Optional[Callable[[], bool]] = None):
        """
        @param props Mapping of prop name to value
        @param is_mounted Optional presence check, defaults to always mounted
        """
        self.props = props
        self._is_mounted = is_mounted

    def _callback(self, name: str) -> Callable[..., Any]:
        callback = self.props.get(name)
        if not callable(callback):
            raise TypeError(f"Component does not respond to prop '{name}'")
        return callback

    def set_text(self, text: str) -> None:
        self._callback("on_change_text")(text)

    def trigger_press(self) -> None:
        self._callback("on_press")()

    def is_present(self) -> bool:
        if self._is_mounted is None:
            return True
        return bool(self._is_mounted())

    def __repr__(self) -> str:
        return f"PropsComponent(props={sorted(self.props)})"


def wrap(obj: Any) -> IComponent:
    """
    Adapt an object into a component handle.

    - IComponent instances are returned unchanged
    - mappings are treated as props
    - anything else must carry a `props` mapping attribute
    """
    if isinstance(obj, IComponent):
        return obj
    if isinstance(obj, Mapping):
        return PropsComponent(obj)
    props = getattr(obj, "props", None)
    if isinstance(props, Mapping):
        return PropsComponent(props)
    raise TypeError(
        f"Cannot wrap {type(obj).__name__}: expected an IComponent, "
        f"a props mapping or an object with a 'props' mapping"
    )
