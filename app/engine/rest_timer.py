"""Cooperative rest countdown owned by a workout session."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


class RestTimer:
    """Single countdown that ticks once per interval.

    start() replaces a running countdown instead of stacking a second one.
    When an event loop is running, a driver task calls tick() every interval;
    otherwise the owner calls tick() itself. cancel() takes effect immediately.
    """

    def __init__(
        self,
        interval: float = 1.0,
        on_finished: Callable[[], None] | None = None,
    ) -> None:
        self.interval = interval
        self.on_finished = on_finished
        self.total_seconds = 0
        self.remaining_seconds = 0
        self.is_running = False
        self._task: asyncio.Task | None = None

    def start(self, seconds: int) -> None:
        self.cancel()
        if seconds <= 0:
            return
        self.total_seconds = seconds
        self.remaining_seconds = seconds
        self.is_running = True
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return  # no loop: ticks are driven by the owner
        self._task = loop.create_task(self._run())

    def tick(self) -> None:
        if not self.is_running:
            return
        self.remaining_seconds -= 1
        logger.debug("Rest timer: %ss left", self.remaining_seconds)
        if self.remaining_seconds <= 0:
            self.remaining_seconds = 0
            self.is_running = False
            logger.debug("Rest timer finished")
            if self.on_finished is not None:
                self.on_finished()

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
        self.is_running = False
        self.remaining_seconds = 0

    async def _run(self) -> None:
        while self.is_running:
            await asyncio.sleep(self.interval)
            self.tick()
