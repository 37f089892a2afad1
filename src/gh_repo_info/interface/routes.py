"""API routes — thin controllers that delegate to the repository fetcher."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from gh_repo_info.domain.ports.repo_fetcher import RepoFetcher
from gh_repo_info.domain.value_objects import RepoPath
from gh_repo_info.interface.dependencies import get_fetcher
from gh_repo_info.interface.schemas import ErrorResponse, RepositoryResponse

router = APIRouter()


@router.get(
    "/repos/{owner}/{repo}",
    response_model=RepositoryResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Repository not found"},
        502: {"model": ErrorResponse, "description": "GitHub unreachable or returned an unexpected response"},
    },
)
async def repository_info(
    owner: str,
    repo: str,
    fetcher: RepoFetcher = Depends(get_fetcher),
) -> RepositoryResponse:
    """Look up a single GitHub repository."""
    info = await fetcher.fetch(RepoPath(owner, repo))
    return RepositoryResponse.model_validate(info)
