"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Attributes:
        encoding: Text encoding used to read and write subtitle files
        strip_html: Strip ``<...>`` tags from subtitle text when parsing
        log_level: Minimum log level ("DEBUG", "INFO", ...)
        log_json: Render log lines as JSON instead of console output
        max_content_chars: Largest SRT body accepted by the HTTP API
    """

    encoding: str = "utf-8"
    strip_html: bool = False

    log_level: str = "INFO"
    log_json: bool = False

    max_content_chars: int = 5_000_000

    model_config = SettingsConfigDict(
        env_prefix="SUBRIP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Returns:
        Settings instance loaded from environment

    Note:
        Settings are cached for performance. Use get_settings.cache_clear()
        to reload settings in tests.
    """
    return Settings()
