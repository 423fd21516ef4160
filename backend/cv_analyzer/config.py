from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings

REQUIRED_ENV_VARS = ("OPENAI_API_KEY",)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "Professional CV Analysis API"
    version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # Completion service
    openai_api_key: str = ""
    ai_model: str = "gpt-4o-mini"
    ai_max_tokens: int = 1000
    ai_temperature: float = 0.3
    ai_timeout_seconds: float = 60.0

    # Uploads
    max_upload_size: int = 5 * 1024 * 1024  # 5 MB
    allowed_upload_types: list[str] = ["application/pdf"]

    # CORS
    cors_origin: str = "*"
    cors_methods: list[str] = ["GET", "POST"]
    cors_allowed_headers: list[str] = ["Content-Type", "Authorization"]

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "frozen": True,
    }

    @model_validator(mode="after")
    def _check_required(self) -> "Settings":
        missing = [name for name in REQUIRED_ENV_VARS if not getattr(self, name.lower()).strip()]
        if missing:
            raise ValueError(f"Missing required environment variables: {', '.join(missing)}")
        return self


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()


# ── Prompt Configuration ────────────────────────────────────────────────────

# Per-prompt overrides; prompts not listed use ai_max_tokens / ai_temperature.
PROMPT_CONFIG = {
    "cv_summary": {"temperature": 0.7, "max_tokens": 1000},
    "qualification_matcher": {"temperature": 0.7, "max_tokens": 800},
}
