from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8000

    upload_dir: str = "temp"
    max_upload_size_bytes: int = 25 * 1024 * 1024
    allowed_file_types: list[str] = ["pdf", "docx"]

    session_secret: str = "legal-summarizer-secret"
    session_cookie_name: str = "session"
    session_max_age_seconds: int = 24 * 60 * 60

    document_expiry_hours: int = 24
    cleanup_interval_seconds: int = 60 * 60

    pdf_engine: str = "pdfplumber"

    summarization_provider: str = "openai"
    openai_api_key: str = ""
    openai_model_name: str = "gpt-4o"
    openai_base_url: str | None = None
    openai_timeout_seconds: int = 60
    summary_temperature: float = 0.2
    summary_max_tokens: int = 2048
    summary_max_input_chars: int = 15000
