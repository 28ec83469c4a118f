"""Application configuration settings."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_default_database_url() -> str:
    """SQLite file on the mounted /data volume when present, else in the working directory."""
    if os.path.isdir("/data"):
        return "sqlite:////data/haven.db"
    return "sqlite:///./haven.db"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
    )

    PROJECT_NAME: str = "Haven"
    VERSION: str = "0.1.0"
    # uvicorn auto-reload for `python -m app.main`
    RELOAD: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    DATABASE_URL: str = _get_default_database_url()

    # Water usage reporting
    USAGE_LOOKBACK_MONTHS: int = 24
    REPORT_MONTHS: int = 6


settings = Settings()
