import asyncio
from collections.abc import Coroutine
from typing import Any

from app.logging.logger import Log


class BackgroundTaskRunner:
    """Fire-and-forget task scheduling on the running event loop.

    Keeps a reference to every pending task so it is not garbage collected,
    logs failures, and lets callers wait for everything submitted so far.
    """

    def __init__(self) -> None:
        self._tasks: set[asyncio.Task[Any]] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def submit(self, coro: Coroutine[Any, Any, Any], name: str) -> asyncio.Task[Any]:
        """Schedule ``coro`` without awaiting it. Must be called from the loop."""
        task = asyncio.create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        Log.debug(f"Task {name} submitted ({self.pending} pending)")
        return task

    async def join(self) -> None:
        """Wait until all submitted tasks, including ones added meanwhile, finish."""
        while self._tasks:
            await asyncio.wait(set(self._tasks))

    async def shutdown(self) -> None:
        """Cancel pending tasks and wait for them to unwind."""
        tasks = set(self._tasks)
        if not tasks:
            return
        Log.info(f"Cancelling {len(tasks)} pending background tasks")
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    def _on_done(self, task: asyncio.Task[Any]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            Log.warning(f"Task {task.get_name()} was cancelled")
            return
        exc = task.exception()
        if exc is not None:
            Log.error(f"Task {task.get_name()} failed: {exc}")
        else:
            Log.debug(f"Task {task.get_name()} completed")
