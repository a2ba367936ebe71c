class ExtractionError(Exception):
    """Base exception for all text extraction errors."""


class UnsupportedFileTypeError(ExtractionError):
    """Raised when a document type has no extraction adapter."""


class TextExtractionError(ExtractionError):
    """Raised when a document cannot be read or parsed."""


class PdfExtractionError(TextExtractionError):
    """Raised when PDF text extraction fails."""


class DocxExtractionError(TextExtractionError):
    """Raised when DOCX text extraction fails."""
