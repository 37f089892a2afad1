"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx

from gh_repo_info.domain.ports.repo_fetcher import RepoFetcher
from gh_repo_info.infrastructure.config import get_settings
from gh_repo_info.infrastructure.github_rest_adapter import GitHubRestAdapter

_http_client: httpx.AsyncClient | None = None


async def startup(transport: httpx.AsyncBaseTransport | None = None) -> None:
    """Initialise the shared HTTP client — called from the lifespan context manager."""
    global _http_client  # noqa: PLW0603

    settings = get_settings()
    _http_client = httpx.AsyncClient(
        timeout=httpx.Timeout(settings.request_timeout),
        follow_redirects=True,
        transport=transport,
    )


async def shutdown() -> None:
    """Release the shared HTTP client."""
    global _http_client  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None


def get_fetcher() -> RepoFetcher:
    """Build a GitHub adapter on top of the shared client."""
    settings = get_settings()

    assert _http_client is not None, "startup() was not called"

    return GitHubRestAdapter(
        _http_client,
        api_host=settings.github_api_host,
        user_agent=settings.user_agent,
    )
