"""Offline summarization client adapter.

Returns a fixed, valid summary payload without network calls. Selected with
``SUMMARIZATION_PROVIDER=example`` for local development and tests.
"""

import json
from typing import ClassVar

from app.summarization.client_base import BaseSummarizationClient


class ExampleClientAdapter(BaseSummarizationClient):
    """Adapter that answers every request with the same summary JSON."""

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "parties": [
            {"name": "PARTY_A", "role": "Client"},
            {"name": "PARTY_B", "role": "Service Provider"},
        ],
        "obligations": ["PARTY_B provides the services described in the agreement"],
        "dates": [],
        "terms": [],
        "risks": [],
        "raw": "Example summary generated without an AI provider.",
    }

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        _ = model, temperature, max_tokens, system_prompt, user_prompt
        return json.dumps(self.DEFAULT_RESPONSE)
