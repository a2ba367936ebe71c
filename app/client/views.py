from enum import Enum
from typing import Any


class ViewState(str, Enum):
    """Screens the processing-wait flow can end up on."""

    LOADING = "loading"
    PROCESSING = "processing"
    SUMMARY = "summary"
    FAILED = "failed"
    TIMED_OUT = "timed_out"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        return self not in (ViewState.LOADING, ViewState.PROCESSING)


def resolve_view(payload: dict[str, Any]) -> ViewState:
    """Pick the view for a document detail payload from the API.

    The summary view needs both ``isProcessed`` and a summary; a processing
    error always wins over the summary.
    """
    if payload.get("processingError"):
        return ViewState.FAILED
    if payload.get("isProcessed") and payload.get("summary") is not None:
        return ViewState.SUMMARY
    return ViewState.PROCESSING
