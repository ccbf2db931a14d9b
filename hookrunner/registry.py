"""
@file registry.py
@brief Suite-scoped mapping of hook identifiers to live component handles.
"""

from __future__ import annotations

import threading
import weakref
from typing import Any, Callable, Dict, List, Optional

from .exceptions import RegistrationError


class Registry:
    """
    Identifier -> component handle map for one test run.

    Handles are held weakly where possible so the registry never keeps an
    unmounted component alive. Writes come from mount/unmount hooks, reads
    from the locator; a lock guards both for hosts that mount on a UI thread.

    Weak holding means the caller must own the handle. A throwaway adapter
    such as `register(id, wrap(props))` has no other owner and reads as
    absent as soon as it is collected. Ref callbacks from `generate_test_hook`
    keep their handle until unmount, so they are unaffected. Hosts that
    register adapters directly should use `Registry(weak=False)`.
    """

    def __init__(self, weak: bool = True):
        self._weak = weak
        self._lock = threading.Lock()
        self._refs: Dict[str, Callable[[], Any]] = {}

    def _make_ref(self, handle: Any) -> Callable[[], Any]:
        if self._weak:
            try:
                return weakref.ref(handle)
            except TypeError:
                pass
        return lambda: handle

    def register(self, identifier: str, handle: Any) -> None:
        """Map identifier to handle, overwriting any previous mapping."""
        if not isinstance(identifier, str) or not identifier:
            raise RegistrationError("Hook identifier must be a non-empty string")
        if handle is None:
            raise RegistrationError(f"Cannot register None for identifier '{identifier}'")
        ref = self._make_ref(handle)
        with self._lock:
            self._refs[identifier] = ref

    def get(self, identifier: str) -> Optional[Any]:
        """Return the live handle for identifier, or None. Never blocks on the UI."""
        with self._lock:
            ref = self._refs.get(identifier)
            if ref is None:
                return None
            handle = ref()
            if handle is None:
                # collected
                del self._refs[identifier]
            return handle

    def remove(self, identifier: str, handle: Any = None) -> bool:
        """
        Remove the mapping for identifier.

        When handle is given, the mapping is only removed if it still points
        at that handle, so unmounting a stale component cannot drop the one
        that replaced it.

        @return True if a mapping was removed
        """
        with self._lock:
            ref = self._refs.get(identifier)
            if ref is None:
                return False
            if handle is not None and ref() is not handle:
                return False
            del self._refs[identifier]
            return True

    def clear(self) -> None:
        with self._lock:
            self._refs.clear()

    def identifiers(self) -> List[str]:
        with self._lock:
            return sorted(k for k, ref in self._refs.items() if ref() is not None)

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and self.get(identifier) is not None

    def __len__(self) -> int:
        return len(self.identifiers())

    def __repr__(self) -> str:
        return f"Registry(identifiers={self.identifiers()})"
