from enum import Enum


class ProcessingState(str, Enum):
    """States a pipeline run moves through for one document."""

    UPLOADED = "uploaded"
    EXTRACTING = "extracting"
    EXTRACTED = "extracted"
    SUMMARIZING = "summarizing"
    SUMMARIZED = "summarized"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (ProcessingState.SUMMARIZED, ProcessingState.FAILED)
