"""GitHub REST API adapters — implement the RepoFetcher port.

:class:`GitHubRestAdapter` suspends on an :class:`httpx.AsyncClient`;
:class:`BlockingGitHubRestAdapter` blocks on an :class:`httpx.Client`.
Both go through the same status check and decode step.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from gh_repo_info.domain.entities import RepositoryInfo
from gh_repo_info.domain.exceptions import (
    DecodeError,
    NonSuccessStatusError,
    TransportError,
)
from gh_repo_info.domain.value_objects import DEFAULT_API_HOST, RepoPath

logger = logging.getLogger(__name__)

USER_AGENT = "gh-repo-info"
DEFAULT_TIMEOUT = 30.0


def _request_headers(user_agent: str) -> dict[str, str]:
    # GitHub rejects requests without a User-Agent.
    return {
        "Accept": "application/vnd.github+json",
        "User-Agent": user_agent,
    }


def _read_repository(resp: httpx.Response, path: RepoPath) -> RepositoryInfo:
    """Check the status line, then decode the (already read) body."""
    if not resp.is_success:
        logger.warning(
            "GitHub API returned HTTP %s for %s", resp.status_code, path.full_name
        )
        raise NonSuccessStatusError(resp.status_code)

    try:
        return RepositoryInfo.model_validate_json(resp.content)
    except ValidationError as exc:
        logger.warning(
            "Response for %s does not match the repository schema (%d errors)",
            path.full_name,
            exc.error_count(),
        )
        raise DecodeError(exc) from exc


class GitHubRestAdapter:
    """Concrete RepoFetcher backed by the GitHub v3 REST API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        api_host: str = DEFAULT_API_HOST,
        user_agent: str = USER_AGENT,
    ) -> None:
        self._client = client
        self._api_host = api_host
        self._headers = _request_headers(user_agent)

    async def fetch(self, path: RepoPath) -> RepositoryInfo:
        """GET /repos/{owner}/{repo} → RepositoryInfo."""
        url = path.api_url(self._api_host)
        logger.debug("GET %s", url)
        try:
            resp = await self._client.get(url, headers=self._headers)
        except httpx.HTTPError as exc:
            raise TransportError(exc) from exc
        return _read_repository(resp, path)


class BlockingGitHubRestAdapter:
    """Blocking twin of :class:`GitHubRestAdapter`.

    Must not be used from inside a running event loop: the calling thread
    blocks for the whole request.
    """

    def __init__(
        self,
        client: httpx.Client,
        *,
        api_host: str = DEFAULT_API_HOST,
        user_agent: str = USER_AGENT,
    ) -> None:
        self._client = client
        self._api_host = api_host
        self._headers = _request_headers(user_agent)

    def fetch(self, path: RepoPath) -> RepositoryInfo:
        """GET /repos/{owner}/{repo} → RepositoryInfo."""
        url = path.api_url(self._api_host)
        logger.debug("GET %s", url)
        try:
            resp = self._client.get(url, headers=self._headers)
        except httpx.HTTPError as exc:
            raise TransportError(exc) from exc
        return _read_repository(resp, path)
