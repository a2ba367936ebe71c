from abc import ABC, abstractmethod


class BaseTextExtractor(ABC):
    """Contract for all format-specific text extraction adapters."""

    @abstractmethod
    def extract(self, data: bytes) -> str:
        """Extract plain text from a binary document.

        Args:
            data: Raw file content.

        Returns:
            Extracted text as a single normalized string.

        Raises:
            TextExtractionError: if extraction fails for any reason.
        """


class BasePdfExtractor(BaseTextExtractor):
    """Contract for PDF extraction engines."""
