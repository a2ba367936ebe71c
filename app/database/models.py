from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

from app.summarization.models import Summary


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class FileType(str, Enum):
    """Document formats accepted for upload."""

    PDF = "pdf"
    DOCX = "docx"

    def __str__(self) -> str:
        return self.value


class ProcessingStatus(str, Enum):
    """Persisted progress of a document, derived from its fields."""

    UPLOADED = "uploaded"
    EXTRACTED = "extracted"
    SUMMARIZED = "summarized"
    FAILED = "failed"


@dataclass(frozen=True)
class DocumentRecord:
    """An uploaded document and its processing results.

    Records are immutable snapshots; the repository replaces them on update.
    """

    id: int
    session_id: str
    file_name: str
    file_type: FileType
    file_size: int
    uploaded_at: datetime
    original_text: str | None = None
    processed_at: datetime | None = None
    summary: Summary | None = None
    processing_error: str | None = None

    @property
    def is_processed(self) -> bool:
        return self.processed_at is not None

    @property
    def status(self) -> ProcessingStatus:
        if self.processing_error is not None:
            return ProcessingStatus.FAILED
        if self.summary is not None:
            return ProcessingStatus.SUMMARIZED
        if self.original_text is not None:
            return ProcessingStatus.EXTRACTED
        return ProcessingStatus.UPLOADED
