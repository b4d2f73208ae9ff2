"""
Tick sources for the session runner.

A ticker calls one callback once per interval until stopped. The runner
owns exactly one ticker; stopping it (pause, completion, close) cancels
the pending tick so no orphaned callbacks fire afterwards.
"""

import asyncio
import logging
from typing import Callable, Optional, Protocol

from core.constants import TICK_INTERVAL_SECONDS

logger = logging.getLogger(__name__)

TickCallback = Callable[[], None]


class Ticker(Protocol):
    """A cancellable repeating timer."""

    @property
    def running(self) -> bool:
        """Whether ticks are currently scheduled."""
        ...

    def start(self, callback: TickCallback) -> None:
        """Start calling `callback` once per interval. No-op if running."""
        ...

    def stop(self) -> None:
        """Cancel any pending tick. No-op if not running."""
        ...


class AsyncioTicker:
    """
    Repeating timer on the running asyncio event loop.

    Ticks are scheduled against the loop clock rather than chained from
    the previous callback, so slow callbacks do not accumulate drift.
    """

    def __init__(self, interval: float = TICK_INTERVAL_SECONDS):
        self._interval = interval
        self._callback: Optional[TickCallback] = None
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, callback: TickCallback) -> None:
        if self.running:
            return
        self._callback = callback
        self._task = asyncio.get_running_loop().create_task(self._run())

    def stop(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None

    async def _run(self) -> None:
        loop = asyncio.get_running_loop()
        next_tick = loop.time() + self._interval
        while True:
            await asyncio.sleep(max(0.0, next_tick - loop.time()))
            next_tick += self._interval
            try:
                self._callback()
            except Exception:
                logger.exception("Tick callback failed; stopping ticker")
                self._task = None
                return
