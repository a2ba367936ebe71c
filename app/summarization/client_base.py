from abc import ABC, abstractmethod


class BaseSummarizationClient(ABC):
    """Contract for provider-specific summarization AI clients."""

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        """Return the provider's JSON response as plain text."""
