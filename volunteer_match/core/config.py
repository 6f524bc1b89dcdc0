from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./volunteer_match.db"


class Settings(BaseSettings):
    """Service settings read from the environment, with optional .env override.

    Only the database location and the logging mode matter to the match
    service; matching weights are not configurable from the environment.
    """

    ENV: Literal["development", "staging", "production"] = "development"
    """Environment mode: selects console or JSON logs and guards database resets."""

    DEBUG: bool = True
    """Log the per-criterion breakdown of every scored event."""

    APP_NAME: str = "Volunteer Match Service"
    """Title reported by the FastAPI application and startup logs."""

    DATABASE_URL: Optional[str] = None
    """Async SQLAlchemy URL (postgresql+asyncpg://... or sqlite+aiosqlite://...)."""

    DB_ECHO: bool = False
    """Echo SQL statements emitted by SQLAlchemy."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @property
    def database_url(self) -> str:
        """Configured database URL, or a local SQLite file when unset."""
        return self.DATABASE_URL or DEFAULT_DATABASE_URL


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings singleton; the environment is read once per process."""
    return Settings()
