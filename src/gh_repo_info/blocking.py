"""Blocking variant of :func:`gh_repo_info.api.get`.

The functions here must not be called from within a running event loop;
they block the calling thread until the response has been read.
"""

from __future__ import annotations

import httpx

from gh_repo_info.domain.entities import RepositoryInfo
from gh_repo_info.domain.value_objects import DEFAULT_API_HOST, RepoPath
from gh_repo_info.infrastructure.github_rest_adapter import (
    DEFAULT_TIMEOUT,
    USER_AGENT,
    BlockingGitHubRestAdapter,
)


def get(
    owner: str,
    repo: str,
    *,
    api_host: str = DEFAULT_API_HOST,
    user_agent: str = USER_AGENT,
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.BaseTransport | None = None,
) -> RepositoryInfo:
    """Get GitHub repository information given an ``owner`` and ``repo``."""
    with httpx.Client(
        transport=transport,
        timeout=timeout,
        follow_redirects=True,
    ) as client:
        adapter = BlockingGitHubRestAdapter(
            client, api_host=api_host, user_agent=user_agent
        )
        return adapter.fetch(RepoPath(owner, repo))
