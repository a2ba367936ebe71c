"""AI-powered legal document summarizer."""

import json
from pathlib import Path

from app.logging.logger import Log
from app.summarization.base import BaseSummarizer
from app.summarization.client_base import BaseSummarizationClient
from app.summarization.exceptions import SummarizationError
from app.summarization.models import Summary, degraded_summary
from app.summarization.prompt_loader import load_system_prompt
from app.summarization.validator import validate_and_build

TRUNCATION_MARKER = "\n\n[Document truncated due to length]"


class Summarizer(BaseSummarizer):
    """Summarizes legal document text into structured data using an AI provider.

    Failures never propagate: a degraded summary describing the error is
    returned instead.
    """

    def __init__(
        self,
        *,
        client: BaseSummarizationClient,
        model: str,
        temperature: float = 0.2,
        max_tokens: int = 2048,
        max_input_chars: int = 15000,
        system_prompt_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.3, temperature))
        self._max_tokens = max_tokens
        self._max_input_chars = max_input_chars
        self._system_prompt = load_system_prompt(system_prompt_path)

    def summarize(self, text: str) -> Summary:
        """Transform document text into a Summary, degrading on any failure."""
        prompt = self.truncate(text)
        try:
            raw_response = self._call_ai(prompt)
            Log.debug(f"AI raw response:\n{raw_response}")
            result = validate_and_build(self._parse_json(raw_response))
        except SummarizationError as exc:
            Log.error(f"Summarization failed, returning degraded summary: {exc}")
            return degraded_summary(str(exc))
        except Exception as exc:
            Log.exception(f"Unexpected summarization error: {exc}")
            return degraded_summary(str(exc))

        Log.info(
            f"Summarization complete: {len(result.parties)} parties, "
            f"{len(result.obligations)} obligations, {len(result.risks)} risks"
        )
        return result

    def truncate(self, text: str) -> str:
        """Cut text to the input budget, appending a marker when cut."""
        if len(text) <= self._max_input_chars:
            return text
        Log.info(f"Truncating document text from {len(text)} to {self._max_input_chars} chars")
        return text[: self._max_input_chars] + TRUNCATION_MARKER

    def _call_ai(self, prompt: str) -> str:
        return self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
        )

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        cleaned = raw.strip()
        if not cleaned:
            raise SummarizationError("AI returned empty response")
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise SummarizationError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise SummarizationError("JSON response must be an object")
        return parsed
