"""Command-line entry point: print one repository's metadata as JSON."""

from __future__ import annotations

import argparse
import logging
import sys

from gh_repo_info import blocking
from gh_repo_info.domain.exceptions import GhRepoInfoError
from gh_repo_info.domain.value_objects import RepoPath
from gh_repo_info.infrastructure.config import get_settings

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="gh-repo-info",
        description="Get GitHub repository information.",
    )
    parser.add_argument(
        "repository",
        help="owner/repo or https://github.com/<owner>/<repo>",
    )
    parser.add_argument(
        "--api-host",
        default=settings.github_api_host,
        help="GitHub host; the API is reached at api.<host> (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="logging level (default: %(default)s)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )

    try:
        path = RepoPath.from_string(args.repository)
        logger.debug("Looking up %s via api.%s", path.full_name, args.api_host)
        info = blocking.get(
            path.owner,
            path.repo,
            api_host=args.api_host,
            user_agent=settings.user_agent,
            timeout=settings.request_timeout,
        )
    except GhRepoInfoError as exc:
        print(f"error: {exc}", file=sys.stderr)
        if exc.cause is not None:
            print(f"caused by: {exc.cause}", file=sys.stderr)
        return 1

    print(info.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
