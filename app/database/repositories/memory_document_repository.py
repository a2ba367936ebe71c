import dataclasses
import itertools
import threading
from collections.abc import Callable
from datetime import datetime, timedelta

from app.database.models import DocumentRecord, FileType, utcnow
from app.database.repositories.base import DocumentRepository
from app.processor.exceptions import DocumentNotFoundError

UPDATABLE_FIELDS = frozenset({"original_text", "processed_at", "summary", "processing_error"})


class InMemoryDocumentRepository(DocumentRepository):
    """Process-lifetime document storage.

    Every operation holds a single lock and records are immutable, so readers
    always see a complete snapshot.
    """

    def __init__(self, clock: Callable[[], datetime] = utcnow) -> None:
        self._clock = clock
        self._documents: dict[int, DocumentRecord] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def create(
        self,
        session_id: str,
        file_name: str,
        file_type: FileType,
        file_size: int,
    ) -> DocumentRecord:
        with self._lock:
            document = DocumentRecord(
                id=next(self._ids),
                session_id=session_id,
                file_name=file_name,
                file_type=FileType(file_type),
                file_size=file_size,
                uploaded_at=self._clock(),
            )
            self._documents[document.id] = document
        return document

    def find_by_id(self, document_id: int) -> DocumentRecord | None:
        with self._lock:
            return self._documents.get(document_id)

    def list_by_session(self, session_id: str) -> list[DocumentRecord]:
        with self._lock:
            owned = [d for d in self._documents.values() if d.session_id == session_id]
        # sorted() is stable, so equal timestamps keep insertion order
        return sorted(owned, key=lambda d: d.uploaded_at, reverse=True)

    def update(self, document_id: int, **changes: object) -> DocumentRecord:
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Fields cannot be updated: {sorted(unknown)}")
        with self._lock:
            document = self._documents.get(document_id)
            if document is None:
                raise DocumentNotFoundError(f"Document {document_id} not found")
            if changes:
                document = dataclasses.replace(document, **changes)  # type: ignore[arg-type]
                self._documents[document_id] = document
        return document

    def delete(self, document_id: int) -> bool:
        with self._lock:
            return self._documents.pop(document_id, None) is not None

    def delete_expired(self, max_age_hours: float) -> int:
        cutoff = self._clock() - timedelta(hours=max_age_hours)
        with self._lock:
            expired = [
                doc_id for doc_id, doc in self._documents.items() if doc.uploaded_at < cutoff
            ]
            for doc_id in expired:
                del self._documents[doc_id]
        return len(expired)
