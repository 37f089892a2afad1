"""Domain entities — the subset of the GitHub repository payload we consume.

The models are frozen and strict.  Fields are read only under their JSON
wire names (``html_url``, ``fork``, ``login``, ...) and serialized under the
attribute names; a missing field, a value of the wrong JSON type or an
unknown owner type is a validation error, never a default.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr

Count = Annotated[StrictInt, Field(ge=0)]

_MODEL_CONFIG = ConfigDict(frozen=True, extra="ignore")


class OwnerKind(str, Enum):
    """Account type of a repository owner."""

    USER = "User"
    ORGANIZATION = "Organization"


class OwnerInfo(BaseModel):
    """The account owning a repository."""

    model_config = _MODEL_CONFIG

    name: StrictStr = Field(validation_alias="login")
    url: StrictStr = Field(validation_alias="html_url")
    avatar_url: StrictStr
    kind: OwnerKind = Field(validation_alias="type")


class LicenseInfo(BaseModel):
    """License detected by GitHub for a repository."""

    model_config = _MODEL_CONFIG

    key: StrictStr  # short identifier, e.g. "mit" or "other"
    name: StrictStr


class RepositoryInfo(BaseModel):
    """Snapshot of one repository as returned by ``GET /repos/{owner}/{repo}``."""

    model_config = _MODEL_CONFIG

    name: StrictStr
    full_name: StrictStr
    url: StrictStr = Field(validation_alias="html_url")

    owner: OwnerInfo

    stargazers_count: Count
    subscribers_count: Count
    forks_count: Count
    # open issues + open pull requests
    open_issues_count: Count

    is_fork: StrictBool = Field(validation_alias="fork")
    is_archived: StrictBool = Field(validation_alias="archived")

    default_branch: StrictStr

    homepage: StrictStr
    description: StrictStr
    license: LicenseInfo

    language: StrictStr
    topics: tuple[StrictStr, ...]
