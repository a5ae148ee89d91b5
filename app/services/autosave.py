"""Debounced auto-save timer."""

import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class AutoSaver:
    """
    Runs ``callback`` once edits have been quiet for ``delay`` seconds.

    Each ``schedule()`` cancels the pending timer and starts a new one, so at
    most one save is ever pending. The callback runs synchronously on the
    event loop.
    """

    def __init__(
        self,
        callback: Callable[[], None],
        delay: float,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        self.callback = callback
        self.delay = delay
        self._loop = loop
        self._handle: Optional[asyncio.TimerHandle] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self) -> None:
        """Start (or restart) the quiet-period timer."""
        self.cancel()
        loop = self._loop or asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
        self._handle = None
        logger.debug("Auto-save timer fired")
        self.callback()
