"""Pydantic response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from gh_repo_info.domain.entities import OwnerKind


class OwnerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    url: str
    avatar_url: str
    kind: OwnerKind


class LicenseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    key: str
    name: str


class RepositoryResponse(BaseModel):
    """Successful response from ``GET /repos/{owner}/{repo}``.

    Built from a ``RepositoryInfo`` via ``from_attributes``; uses the
    attribute names, not GitHub's wire names.
    """

    model_config = ConfigDict(from_attributes=True)

    name: str
    full_name: str
    url: str
    owner: OwnerResponse
    stargazers_count: int
    subscribers_count: int
    forks_count: int
    open_issues_count: int
    is_fork: bool
    is_archived: bool
    default_branch: str
    homepage: str
    description: str
    license: LicenseResponse
    language: str
    topics: list[str]


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str
