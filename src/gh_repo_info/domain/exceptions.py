"""Domain exception hierarchy.

Every failure of a repository lookup is one of three kinds:
:class:`TransportError`, :class:`NonSuccessStatusError` or
:class:`DecodeError`.  Adapters translate library errors into these; the
outer surfaces (HTTP handlers, CLI) translate them for the user.
"""

from __future__ import annotations

from http import HTTPStatus


class GhRepoInfoError(Exception):
    """Base exception for the entire package."""

    @property
    def cause(self) -> BaseException | None:
        """The underlying error this one wraps, if any."""
        return None


# ── Input validation ────────────────────────────────────────────────────────


class InvalidRepositoryError(GhRepoInfoError):
    """The supplied string does not name a GitHub repository."""


# ── Lookup failures ─────────────────────────────────────────────────────────


class TransportError(GhRepoInfoError):
    """The request could not be sent or the response not fully received."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"send request failed: {cause}")
        self._cause = cause

    @property
    def cause(self) -> BaseException:
        return self._cause


class NonSuccessStatusError(GhRepoInfoError):
    """The server answered with a status outside 200-299."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"response non-successful: {_describe_status(status_code)}")
        self.status_code = status_code


class DecodeError(GhRepoInfoError):
    """The response body did not match the repository schema."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"deserialization failed: {cause}")
        self._cause = cause

    @property
    def cause(self) -> BaseException:
        return self._cause


def _describe_status(status_code: int) -> str:
    try:
        return f"{status_code} {HTTPStatus(status_code).phrase}"
    except ValueError:
        return str(status_code)
