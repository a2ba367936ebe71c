import json

from app.summarization.example_client_adapter import ExampleClientAdapter
from app.summarization.validator import validate_and_build


class TestExampleClientAdapter:
    def test_returns_valid_summary_json(self) -> None:
        content = ExampleClientAdapter().create_chat_completion(
            model="example",
            temperature=0.0,
            max_tokens=10,
            system_prompt="s",
            user_prompt="u",
        )
        summary = validate_and_build(json.loads(content))
        assert [p.role for p in summary.parties] == ["Client", "Service Provider"]
        assert summary.degraded is False

    def test_response_ignores_input(self) -> None:
        adapter = ExampleClientAdapter()
        first = adapter.create_chat_completion(
            model="a", temperature=0.0, max_tokens=1, system_prompt="x", user_prompt="y"
        )
        second = adapter.create_chat_completion(
            model="b", temperature=0.2, max_tokens=2, system_prompt="p", user_prompt="q"
        )
        assert first == second
