# hookrunner/app.py
"""
@file app.py
@brief IApp built from plain callables.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Optional

from .interfaces import IApp

logger = logging.getLogger(__name__)


class CallbackApp(IApp):
    """
    Reset/remount collaborator backed by callables.

    remount        - Forces the UI tree to rebuild (e.g. swaps the root key).
    clear_storage  - Optional storage wipe, sync or async.
    clear_state    - Whether to run clear_storage between cases. Defaults to False.
    """

    def __init__(
        self,
        remount: Callable[[], Any],
        clear_storage: Optional[Callable[[], Any]] = None,
        clear_state: bool = False,
    ):
        self._remount = remount
        self._clear_storage = clear_storage
        self.clear_state_enabled = clear_state

    async def clear_state(self) -> None:
        if not self.clear_state_enabled or self._clear_storage is None:
            return
        try:
            result = self._clear_storage()
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            logger.warning("[hookrunner] failed to clear app storage: %s: %s", type(e).__name__, e)

    def force_remount(self) -> None:
        self._remount()
