"""Application configuration using Pydantic Settings."""

from pathlib import Path
from typing import Literal
from urllib.parse import quote

from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings, configurable via environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Oxford Dictionaries credentials (https://developer.oxforddictionaries.com)
    app_id: str = ""
    app_key: str = ""

    # Provider endpoint
    base_url: str = "https://od-api.oxforddictionaries.com/api/v2"
    source_lang: str = "en"
    request_timeout: float = 10.0

    # Logging
    log_level: LogLevel = "WARNING"
    log_file_enabled: bool = False
    log_file_path: Path | None = None
    log_file_max_bytes: int = 10 * 1024 * 1024  # 10 MB
    log_file_backup_count: int = 5

    @property
    def resolved_log_file_path(self) -> Path:
        """Return log file path, defaulting to oxdict.log in the working directory."""
        return self.log_file_path or Path("oxdict.log")


def build_entries_url(base_url: str, source_lang: str, expression: str) -> str:
    """Entries endpoint for one expression, percent-encoded as a single path segment."""
    return f"{base_url.rstrip('/')}/entries/{source_lang}/{quote(expression, safe='')}"


settings = Settings()
