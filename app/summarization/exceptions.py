class SummarizationError(Exception):
    """Raised when summarization fails."""


class SummarizationConfigError(SummarizationError):
    """Raised when the AI provider is not configured (e.g. missing API key)."""


class SummarizationValidationError(SummarizationError):
    """Raised when the model output does not match the summary shape."""


class SummarizationNetworkError(SummarizationError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
