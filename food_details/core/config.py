"""Application configuration."""
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Backend
    api_base_url: str = "http://localhost:3333"
    request_timeout: float = 30.0

    # Currency display
    currency_symbol: str = "R$"
    decimal_separator: str = ","
    thousands_separator: str = "."

    # Fake API seed data (YAML)
    seed_file: Optional[str] = None

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
