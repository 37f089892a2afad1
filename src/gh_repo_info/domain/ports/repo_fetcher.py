"""Port: repository fetcher — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from gh_repo_info.domain.entities import RepositoryInfo
from gh_repo_info.domain.value_objects import RepoPath


class RepoFetcher(Protocol):
    """Abstract contract for looking up a single repository."""

    async def fetch(self, path: RepoPath) -> RepositoryInfo:
        """Return the repository record, or raise a ``GhRepoInfoError``."""
        ...
