from abc import ABC, abstractmethod

from app.summarization.models import Summary


class BaseSummarizer(ABC):
    """Contract for all summarization adapters."""

    @abstractmethod
    def summarize(self, text: str) -> Summary:
        """Transform extracted document text into a structured summary.

        Args:
            text: Plain text extracted from the uploaded document.

        Returns:
            Summary with parties, obligations, dates, terms and risks.
            Never raises: failures come back as a degraded summary.
        """
