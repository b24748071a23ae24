"""
Owned periodic timers for a dashboard session.

Timers run as asyncio tasks on the caller's event loop, so callbacks never
overlap each other or the code that started them.
"""

import asyncio
from typing import Callable, Optional

from healthsync.infra import log_utils


class PeriodicTask:
    """
    Call `callback` every `interval` seconds until stopped.

    `start` and `stop` are idempotent. A callback may stop its own task; the
    loop exits before the next tick. Exceptions from the callback are logged
    and the timer keeps going.
    """

    def __init__(
        self,
        name: str,
        interval: float,
        callback: Callable[[], None],
        fire_immediately: bool = False,
    ):
        if interval <= 0:
            raise ValueError(f"{name}: interval must be positive")
        self.name = name
        self.interval = interval
        self.callback = callback
        self.fire_immediately = fire_immediately
        self._task: Optional[asyncio.Task] = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> bool:
        """Schedule the timer. Returns False if it was already running."""
        if self.is_running:
            return False
        loop = asyncio.get_running_loop()
        if self.fire_immediately:
            self._tick()
        self._task = loop.create_task(self._run(), name=self.name)
        return True

    def stop(self) -> bool:
        """Cancel the timer. Returns False if it was not running."""
        if not self.is_running:
            self._task = None
            return False
        task, self._task = self._task, None
        task.cancel()
        return True

    def _tick(self) -> None:
        try:
            self.callback()
        except Exception as e:
            log_utils.log_failure(f"[timer:{self.name}] callback failed: {e}", "ERROR")

    async def _run(self) -> None:
        me = asyncio.current_task()
        while self._task is me:
            await asyncio.sleep(self.interval)
            if self._task is not me:
                break
            self._tick()
