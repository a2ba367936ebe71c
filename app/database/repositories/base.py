from abc import ABC, abstractmethod

from app.database.models import DocumentRecord, FileType


class DocumentRepository(ABC):
    """Contract for document storage backends."""

    @abstractmethod
    def create(
        self,
        session_id: str,
        file_name: str,
        file_type: FileType,
        file_size: int,
    ) -> DocumentRecord:
        """Store a new document with a fresh id and ``uploaded_at = now``."""

    @abstractmethod
    def find_by_id(self, document_id: int) -> DocumentRecord | None:
        """Return the document, or None if no document with this ID exists."""

    @abstractmethod
    def list_by_session(self, session_id: str) -> list[DocumentRecord]:
        """Return the session's documents, newest upload first."""

    @abstractmethod
    def update(self, document_id: int, **changes: object) -> DocumentRecord:
        """Merge the given fields into the document and return the new record.

        Raises:
            DocumentNotFoundError: if no document with this ID exists.
            ValueError: if a field is not updatable.
        """

    @abstractmethod
    def delete(self, document_id: int) -> bool:
        """Remove a document. Returns False if it did not exist."""

    @abstractmethod
    def delete_expired(self, max_age_hours: float) -> int:
        """Remove documents uploaded more than ``max_age_hours`` ago.

        Returns:
            Number of documents removed.
        """
