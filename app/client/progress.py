import asyncio
from collections.abc import Callable

STAGES: tuple[tuple[int, str], ...] = (
    (0, "Extracting document text"),
    (25, "Analyzing document structure"),
    (50, "Identifying key information"),
    (75, "Generating summary"),
)


class ProgressSimulator:
    """Cosmetic progress bar that advances on a timer.

    It knows nothing about the server; it only keeps the wait screen moving.
    """

    def __init__(self, step: int = 5, interval_seconds: float = 0.8) -> None:
        self._step = step
        self._interval_seconds = interval_seconds
        self.progress = 0
        self.status = STAGES[0][1]

    @property
    def done(self) -> bool:
        return self.progress >= 100

    def tick(self) -> int:
        self.progress = min(self.progress + self._step, 100)
        for threshold, label in STAGES:
            if self.progress >= threshold:
                self.status = label
        return self.progress

    async def run(self, on_tick: Callable[[int, str], None] | None = None) -> None:
        """Tick every interval until 100%."""
        while not self.done:
            await asyncio.sleep(self._interval_seconds)
            self.tick()
            if on_tick is not None:
                on_tick(self.progress, self.status)
