import asyncio

from app.database.repositories.base import DocumentRepository
from app.logging.logger import Log


class ExpirySweeper:
    """Periodic loop: sleep -> delete expired documents."""

    def __init__(
        self,
        doc_repo: DocumentRepository,
        interval_seconds: float,
        max_age_hours: float,
    ) -> None:
        self._doc_repo = doc_repo
        self._interval_seconds = interval_seconds
        self._max_age_hours = max_age_hours

    async def run(self, max_sweeps: int | None = None) -> None:
        """Sweep forever until cancelled.

        If max_sweeps is set, stop after that many sweeps (for testing).
        """
        Log.info(
            f"Expiry sweeper started: every {self._interval_seconds}s, "
            f"max age {self._max_age_hours}h"
        )
        sweeps = 0
        while max_sweeps is None or sweeps < max_sweeps:
            await asyncio.sleep(self._interval_seconds)
            self.sweep_once()
            sweeps += 1

    def sweep_once(self) -> int:
        """Delete expired documents. Errors are logged and the sweep reports 0."""
        try:
            count = self._doc_repo.delete_expired(self._max_age_hours)
        except Exception as exc:
            Log.error(f"Error cleaning up expired documents: {exc}")
            return 0
        if count > 0:
            Log.info(f"Cleaned up {count} expired documents")
        return count
