import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    # Primary provider (Google Gemini)
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"

    # Secondary provider (OpenAI-compatible chat completions)
    gateway_api_key: str = ""
    gateway_url: str = "https://api.openai.com/v1/chat/completions"
    fallback_model: str = "gpt-4o-mini"

    provider_timeout_seconds: float = 120.0
    fetch_timeout_seconds: float = 30.0
    max_upload_size_mb: int = 10

    shop_name: str = "Fintech BMS"
    rate_limit: str = "10/minute"
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://localhost:8080",
    ]
    debug: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
