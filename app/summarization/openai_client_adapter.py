import httpx
import openai

from app.summarization.client_base import BaseSummarizationClient
from app.summarization.exceptions import (
    SummarizationConfigError,
    SummarizationError,
    SummarizationNetworkError,
)


class OpenAIClientAdapter(BaseSummarizationClient):
    """Summarization AI client adapter built on OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client: openai.OpenAI | None = None
        if api_key:
            self._client = openai.OpenAI(
                api_key=api_key,
                timeout=timeout_seconds,
                base_url=base_url,
            )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        if self._client is None:
            raise SummarizationConfigError("OpenAI API key is not configured")
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
                response_format={"type": "json_object"},
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise SummarizationNetworkError(
                f"AI provider network error: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise SummarizationNetworkError(
                f"AI provider API error: {exc}"
            ) from exc

        if not response.choices:
            raise SummarizationError("AI returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise SummarizationError("AI returned empty response")
        return content
