"""Get GitHub repository information given an ``owner`` and ``repo``.

Example::

    import asyncio
    from gh_repo_info.api import get

    repo = asyncio.run(get("rust-lang", "rust"))
    print(repo.full_name, repo.stargazers_count, repo.owner.kind)

Each call opens and closes its own HTTP client, so concurrent calls share
no state.  For a blocking variant see :mod:`gh_repo_info.blocking`.
"""

from __future__ import annotations

import httpx

from gh_repo_info.domain.entities import RepositoryInfo
from gh_repo_info.domain.value_objects import DEFAULT_API_HOST, RepoPath
from gh_repo_info.infrastructure.github_rest_adapter import (
    DEFAULT_TIMEOUT,
    USER_AGENT,
    GitHubRestAdapter,
)


async def get(
    owner: str,
    repo: str,
    *,
    api_host: str = DEFAULT_API_HOST,
    user_agent: str = USER_AGENT,
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> RepositoryInfo:
    """Get GitHub repository information given an ``owner`` and ``repo``.

    Raises :class:`~gh_repo_info.domain.exceptions.TransportError`,
    :class:`~gh_repo_info.domain.exceptions.NonSuccessStatusError` or
    :class:`~gh_repo_info.domain.exceptions.DecodeError`.
    """
    async with httpx.AsyncClient(
        transport=transport,
        timeout=timeout,
        follow_redirects=True,
    ) as client:
        adapter = GitHubRestAdapter(
            client, api_host=api_host, user_agent=user_agent
        )
        return await adapter.fetch(RepoPath(owner, repo))
