"""Application settings.

Values come from environment variables or a ``.env`` file found by walking up
from the working directory.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

from election_portal.infrastructure.external.election_commission.client import (
    DEFAULT_FEED_URLS,
)


def find_env_file(start: Path | None = None) -> Path | None:
    """Return the nearest ``.env`` file at or above ``start``."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


ENV_FILE_PATH = find_env_file()


class Settings(BaseSettings):
    # Candidate feed (comma separated, tried in order)
    CANDIDATE_FEED_URLS: str = ",".join(DEFAULT_FEED_URLS)
    CANDIDATE_FEED_TIMEOUT: float = 60.0

    # Dashboard
    CANDIDATES_PER_PAGE: int = 12
    TOP_PARTIES_LIMIT: int = 7

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"

    # Error reporting
    SENTRY_DSN: str = ""
    ENVIRONMENT: str = "development"

    @property
    def candidate_feed_url_list(self) -> list[str]:
        return [u.strip() for u in self.CANDIDATE_FEED_URLS.split(",") if u.strip()]

    model_config = {
        "env_file": str(ENV_FILE_PATH) if ENV_FILE_PATH else None,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()


def reload_settings() -> Settings:
    """Drop the cached settings and read them again."""
    get_settings.cache_clear()
    return get_settings()
