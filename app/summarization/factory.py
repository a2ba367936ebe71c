from app.config.settings import Settings
from app.summarization.base import BaseSummarizer
from app.summarization.example_client_adapter import ExampleClientAdapter
from app.summarization.openai_client_adapter import OpenAIClientAdapter
from app.summarization.summarizer import Summarizer

SUPPORTED_PROVIDERS = ("example", "openai", "openai_compatible")


class SummarizerFactory:
    """Creates the configured summarizer adapter."""

    @classmethod
    def create(cls, settings: Settings) -> BaseSummarizer:
        """Create a configured summarizer from application settings."""
        provider = settings.summarization_provider.lower()
        if provider == "example":
            return Summarizer(
                client=ExampleClientAdapter(),
                model="example",
                temperature=0.0,
                max_input_chars=settings.summary_max_input_chars,
            )
        client = OpenAIClientAdapter(
            api_key=settings.openai_api_key,
            timeout_seconds=settings.openai_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )
        return Summarizer(
            client=client,
            model=settings.openai_model_name,
            temperature=settings.summary_temperature,
            max_tokens=settings.summary_max_tokens,
            max_input_chars=settings.summary_max_input_chars,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = (settings.openai_base_url or "").strip()
            if not url:
                raise ValueError(
                    "openai_base_url is required for "
                    "summarization_provider=openai_compatible"
                )
            return url
        raise ValueError(
            f"Unknown summarization provider '{provider}'. "
            f"Choose from: {list(SUPPORTED_PROVIDERS)}"
        )
