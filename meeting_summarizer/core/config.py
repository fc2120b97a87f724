"""
Application configuration via pydantic-settings.

Loads values from .env file with sensible defaults for local development.
Use ``get_settings()`` to obtain the cached singleton instance.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Meeting Summarizer settings loaded from environment / .env file.

    All settings can be overridden via environment variables or a `.env` file.
    Field names map directly to env var names (case-insensitive).

    The API credential is not a setting: it is entered by the user in
    the UI for each session and never read from disk or the environment.

    Attributes:
        completion_base_url: Root URL of the chat-completion service.
        completion_model: Model identifier sent with every request.
        request_timeout: httpx transport timeout in seconds.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Silently ignore unrecognized env vars
    )

    # --- Completion endpoint ---
    completion_base_url: str = "https://api.openai.com/v1"
    completion_model: str = "gpt-5"
    completion_temperature: float = 0.3  # Low temperature for near-deterministic output
    completion_max_tokens: int = 1000

    # --- Transport ---
    request_timeout: float = 60.0  # Seconds; no retries are attempted

    # --- Application ---
    log_level: str = "INFO"  # Python logging level


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings singleton.

    Uses ``functools.lru_cache`` so the .env file is read only once.
    Subsequent calls return the same ``Settings`` instance.

    Returns:
        Settings: The application-wide configuration object.
    """
    return Settings()
