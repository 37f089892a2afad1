"""Application configuration — loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from gh_repo_info.domain.value_objects import DEFAULT_API_HOST
from gh_repo_info.infrastructure.github_rest_adapter import DEFAULT_TIMEOUT, USER_AGENT


class Settings(BaseSettings):
    """Central configuration loaded from env vars (or ``.env`` file).

    Only the HTTP service and the CLI read these; the library entry points
    take their parameters explicitly.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    github_api_host: str = DEFAULT_API_HOST
    user_agent: str = USER_AGENT
    request_timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()
