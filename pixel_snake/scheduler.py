"""Recurring asyncio tick callback whose rate can change on the fly."""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from .constants import BASE_TICK_RATE

logger = logging.getLogger(__name__)


class TickScheduler:
    """Awaits ``callback`` every ``1 / rate`` seconds.

    Changing the rate reschedules the next callback from the moment of the
    change; a callback that is already running is never interrupted.
    """

    def __init__(self, callback: Callable[[], Awaitable[None]], rate: int = BASE_TICK_RATE):
        self.callback = callback
        self.rate = rate
        self._running = False
        self._task: Optional[asyncio.Task] = None
        self._wakeup: Optional[asyncio.Event] = None

    @property
    def running(self) -> bool:
        return self._running

    @property
    def interval(self) -> float:
        return 1 / self.rate

    def start(self, rate: Optional[int] = None):
        if rate is not None:
            self.rate = rate
        self._running = True
        if self._task is None or self._task.done():
            self._wakeup = asyncio.Event()
            self._task = asyncio.get_running_loop().create_task(self._run())
        else:
            self._wakeup.set()

    def stop(self):
        self._running = False
        if self._wakeup is not None:
            self._wakeup.set()

    def set_rate(self, rate: int):
        if rate == self.rate:
            return
        logger.debug("Tick rate %d -> %d", self.rate, rate)
        self.rate = rate
        if self._running and self._wakeup is not None:
            self._wakeup.set()

    async def _run(self):
        while self._running:
            self._wakeup.clear()
            try:
                await asyncio.wait_for(self._wakeup.wait(), timeout=self.interval)
            except asyncio.TimeoutError:
                if self._running:
                    await self.callback()
