"""Server entry point (``gh-repo-info-server``)."""

from __future__ import annotations

import logging

import uvicorn

from gh_repo_info.infrastructure.config import get_settings


def main() -> None:
    """Configure logging from settings and run the app under uvicorn."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )
    uvicorn.run(
        "gh_repo_info.interface.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
