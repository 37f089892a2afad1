"""Value objects — self-validating domain primitives."""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import quote

from gh_repo_info.domain.exceptions import InvalidRepositoryError

DEFAULT_API_HOST = "github.com"

_REPOSITORY_RE = re.compile(
    r"^(?:https?://(?:www\.)?github\.com/)?"
    r"(?P<owner>[A-Za-z0-9\-_.]+)/(?P<repo>[A-Za-z0-9\-_.]+?)(?:\.git)?/?$"
)


@dataclass(frozen=True, slots=True)
class RepoPath:
    """An ``owner`` / ``repo`` pair addressing one repository.

    The constructor accepts arbitrary strings; both segments are
    percent-encoded when the API URL is built, so they can never add path
    segments, a query string or a fragment.
    """

    owner: str
    repo: str

    @classmethod
    def from_string(cls, value: str) -> RepoPath:
        """Parse ``owner/repo`` or ``https://github.com/owner/repo``."""
        value = value.strip()
        match = _REPOSITORY_RE.match(value)
        if not match:
            raise InvalidRepositoryError(
                f"Invalid repository: '{value}'. "
                "Expected 'owner/repo' or https://github.com/<owner>/<repo>"
            )
        return cls(owner=match["owner"], repo=match["repo"])

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    def api_url(self, host: str = DEFAULT_API_HOST) -> str:
        """Return ``https://api.<host>/repos/<owner>/<repo>`` with encoded segments."""
        # surrogatepass: lone surrogates are encoded, not rejected
        owner = quote(self.owner, safe="", errors="surrogatepass")
        repo = quote(self.repo, safe="", errors="surrogatepass")
        return f"https://api.{host}/repos/{owner}/{repo}"
