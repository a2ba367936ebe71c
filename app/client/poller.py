import asyncio
import contextlib
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import httpx

from app.client.api_client import DocumentsApiClient
from app.client.progress import ProgressSimulator
from app.client.views import ViewState, resolve_view
from app.logging.logger import Log


@dataclass(frozen=True)
class PollResult:
    """Where the wait screen ended up."""

    view: ViewState
    document: dict[str, Any] | None = None
    progress: int = 0
    message: str | None = None


class _ViewReporter:
    def __init__(self, on_view: Callable[[ViewState], None] | None) -> None:
        self._on_view = on_view
        self.current: ViewState | None = None

    def show(self, view: ViewState) -> None:
        if view is self.current:
            return
        self.current = view
        if self._on_view is not None:
            self._on_view(view)


class DocumentPoller:
    """Drives the processing-wait screen from server-reported document state.

    Polls the document on a fixed interval while a cosmetic progress bar runs
    alongside. The screen starts in ``LOADING`` until the first response
    arrives. Gives up with ``TIMED_OUT`` after ``timeout_seconds`` without
    polling again; the server keeps processing regardless.
    """

    def __init__(
        self,
        api: DocumentsApiClient,
        poll_interval_seconds: float = 2.0,
        timeout_seconds: float = 180.0,
        progress_interval_seconds: float = 0.8,
    ) -> None:
        self._api = api
        self._poll_interval_seconds = poll_interval_seconds
        self._timeout_seconds = timeout_seconds
        self._progress_interval_seconds = progress_interval_seconds

    async def wait_for_result(
        self,
        document_id: int,
        on_progress: Callable[[int, str], None] | None = None,
        on_view: Callable[[ViewState], None] | None = None,
    ) -> PollResult:
        """Poll until the document reaches a terminal view.

        ``on_view`` is called once per view change, starting with ``LOADING``.
        """
        reporter = _ViewReporter(on_view)
        reporter.show(ViewState.LOADING)
        simulator = ProgressSimulator(interval_seconds=self._progress_interval_seconds)
        progress_task = asyncio.create_task(simulator.run(on_progress))
        try:
            result = await asyncio.wait_for(
                self._poll(document_id, simulator, reporter),
                timeout=self._timeout_seconds,
            )
        except asyncio.TimeoutError:
            Log.warning(
                f"Document {document_id} not processed within {self._timeout_seconds}s"
            )
            result = PollResult(
                view=ViewState.TIMED_OUT,
                progress=simulator.progress,
                message="Processing is taking longer than expected",
            )
        finally:
            progress_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await progress_task
        reporter.show(result.view)
        return result

    async def _poll(
        self,
        document_id: int,
        simulator: ProgressSimulator,
        reporter: _ViewReporter,
    ) -> PollResult:
        while True:
            try:
                payload = await self._api.get_document(document_id)
            except httpx.HTTPStatusError as exc:
                return PollResult(
                    view=ViewState.ERROR,
                    progress=simulator.progress,
                    message=_error_message(exc.response),
                )
            except httpx.TransportError as exc:
                return PollResult(
                    view=ViewState.ERROR,
                    progress=simulator.progress,
                    message=f"Could not reach the server: {exc}",
                )

            view = resolve_view(payload)
            if view.is_terminal:
                return PollResult(
                    view=view,
                    document=payload,
                    progress=100 if view is ViewState.SUMMARY else simulator.progress,
                    message=payload.get("processingError"),
                )
            reporter.show(view)
            await asyncio.sleep(self._poll_interval_seconds)


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return f"Request failed with status {response.status_code}"
