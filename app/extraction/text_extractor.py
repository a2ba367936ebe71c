from pathlib import Path

from app.config.settings import Settings
from app.database.models import FileType
from app.extraction.base import BaseTextExtractor
from app.extraction.exceptions import TextExtractionError, UnsupportedFileTypeError
from app.extraction.factory import ExtractorFactory
from app.logging.logger import Log


class TextExtractor:
    """Reads a document from disk and dispatches to the adapter for its type."""

    def __init__(self, adapters: dict[FileType, BaseTextExtractor]) -> None:
        self._adapters = adapters

    def extract(self, file_path: Path, file_type: FileType | str) -> str:
        """Extract plain text from the file at ``file_path``.

        Raises:
            UnsupportedFileTypeError: if ``file_type`` is not pdf or docx.
            TextExtractionError: if the file cannot be read or parsed.
        """
        adapter = self._resolve_adapter(file_type)
        try:
            data = Path(file_path).read_bytes()
        except OSError as exc:
            raise TextExtractionError(f"Failed to read {file_path}: {exc}") from exc
        Log.debug(f"Read {len(data)} bytes from {file_path}")
        return adapter.extract(data)

    def _resolve_adapter(self, file_type: FileType | str) -> BaseTextExtractor:
        try:
            key = FileType(str(file_type).lower())
        except ValueError as exc:
            raise UnsupportedFileTypeError(f"Unsupported file type: {file_type}") from exc
        adapter = self._adapters.get(key)
        if adapter is None:
            raise UnsupportedFileTypeError(f"Unsupported file type: {file_type}")
        return adapter


def build_text_extractor(settings: Settings) -> TextExtractor:
    """Build a TextExtractor for the file types the settings accept."""
    return TextExtractor(ExtractorFactory.create_adapters(settings))
