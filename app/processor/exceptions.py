class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class DocumentNotFoundError(ProcessorError):
    """Raised when a document cannot be found in the repository."""


class FileTooLargeError(ProcessorError):
    """Raised when an upload exceeds the configured size limit."""
