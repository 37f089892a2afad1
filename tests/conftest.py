from __future__ import annotations

import copy
from typing import Any

import pytest

RUST_REPO: dict[str, Any] = {
    "id": 724712,
    "name": "rust",
    "full_name": "rust-lang/rust",
    "private": False,
    "url": "https://api.github.com/repos/rust-lang/rust",
    "html_url": "https://github.com/rust-lang/rust",
    "owner": {
        "login": "rust-lang",
        "id": 5430905,
        "url": "https://api.github.com/users/rust-lang",
        "html_url": "https://github.com/rust-lang",
        "avatar_url": "https://avatars.githubusercontent.com/u/5430905?v=4",
        "type": "Organization",
        "site_admin": False,
    },
    "stargazers_count": 82127,
    "watchers_count": 82127,
    "subscribers_count": 1489,
    "forks_count": 10830,
    "open_issues_count": 9549,
    "fork": False,
    "archived": False,
    "default_branch": "master",
    "homepage": "https://www.rust-lang.org",
    "description": "Empowering everyone to build reliable and efficient software.",
    "license": {
        "key": "other",
        "name": "Other",
        "spdx_id": "NOASSERTION",
    },
    "language": "Rust",
    "topics": ["compiler", "hacktoberfest", "language", "rust"],
}


@pytest.fixture()
def rust_repo() -> dict[str, Any]:
    """A fresh copy of a real ``GET /repos/rust-lang/rust`` payload (trimmed)."""
    return copy.deepcopy(RUST_REPO)
