from pathlib import Path

from app.summarization.exceptions import SummarizationError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_system_prompt(path: Path | None = None) -> str:
    """Load the summarization system prompt from a file.

    Args:
        path: Path to the prompt file.
              Defaults to the bundled summary_prompt.txt.

    Returns:
        The prompt text.

    Raises:
        SummarizationError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "summary_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SummarizationError(f"Failed to load system prompt: {exc}") from exc
