"""Repeating tasks on the asyncio event loop."""
import asyncio
from typing import Callable, Optional


class PeriodicTask:
    """
    Calls a function at a fixed interval until stopped.

    The task is an explicit handle: nothing runs before start() and nothing
    runs after stop() returns.
    """

    def __init__(self, name: str, interval: float, callback: Callable[[], None],
                 immediate: bool = True):
        """
        Initialize periodic task.

        Args:
            name: Name used in log output
            interval: Seconds between calls
            callback: Function called on every tick
            immediate: Call once right away instead of waiting one interval
        """
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")

        self.name = name
        self.interval = interval
        self.callback = callback
        self.immediate = immediate
        self.ticks = 0
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start ticking on the running event loop. No-op if already running."""
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run(), name=self.name)

    async def stop(self) -> None:
        """Cancel the task and wait for it to finish."""
        task, self._task = self._task, None
        if task is None:
            return

        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    async def _run(self) -> None:
        loop = asyncio.get_running_loop()
        next_tick = loop.time()
        if not self.immediate:
            next_tick += self.interval

        while True:
            # sleep(0) still yields to the other tasks on the loop
            await asyncio.sleep(max(0.0, next_tick - loop.time()))

            self._tick()

            next_tick += self.interval
            # Skip missed ticks rather than firing a burst to catch up
            now = loop.time()
            if next_tick < now:
                next_tick = now

    def _tick(self) -> None:
        self.ticks += 1
        try:
            self.callback()
        except Exception as e:
            print(f"Error in {self.name} task: {e}")
