# ABOUTME: Cancellable periodic task on the running asyncio loop.
# ABOUTME: Rearming replaces the live task, so at most one instance per timer ever runs.

import asyncio
import contextlib
import logging
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)


class RefreshTimer:
    """Calls an async callback every `interval` seconds until cancelled."""

    def __init__(self, interval: float, callback: Callable[[], Awaitable[None]]):
        self.interval = interval
        self._callback = callback
        self._task: asyncio.Task | None = None

    @property
    def active(self) -> bool:
        return self._task is not None and not self._task.done()

    def arm(self) -> None:
        """Cancel any live instance and start a fresh interval."""
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.debug("Refresh timer armed, every %ss", self.interval)

    def cancel(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None

    async def aclose(self) -> None:
        """Cancel the live task and wait for it to finish unwinding."""
        task = self._task
        self.cancel()
        if task is not None:
            with contextlib.suppress(asyncio.CancelledError):
                await task

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            try:
                await self._callback()
            except Exception:
                logger.exception("Refresh callback failed, keeping timer alive")
