"""Cancellable periodic callbacks on the running event loop."""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

logger = logging.getLogger(__name__)


class Clock:
    """Await `callback` every `period` seconds until it returns False or the clock is stopped.

    The next sleep only begins once the previous callback has finished, so
    callbacks of one clock never overlap.
    """

    def __init__(self, period: float, callback: Callable[[], Awaitable[bool]], name: str = "clock"):
        self.period = period
        self.callback = callback
        self.name = name
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self):
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name=self.name)

    async def _run(self):
        while True:
            await asyncio.sleep(self.period)
            try:
                keep_going = await self.callback()
            except Exception:
                logger.exception("%s callback failed, stopping", self.name)
                return
            if keep_going is False:
                return

    async def stop(self):
        task, self._task = self._task, None
        if task is None or task is asyncio.current_task():
            return
        if not task.done():
            task.cancel()
        # waits without re-raising the clock task's own cancellation
        await asyncio.wait([task])
