"""Global exception handlers — translate domain errors to HTTP responses.

Each domain exception maps to an HTTP status code and the standard
``{"status": "error", "message": "..."}`` envelope.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from gh_repo_info.domain.exceptions import (
    DecodeError,
    GhRepoInfoError,
    NonSuccessStatusError,
    TransportError,
)

logger = logging.getLogger(__name__)

_EXCEPTION_STATUS: list[tuple[type[GhRepoInfoError], int]] = [
    (TransportError, 502),
    (DecodeError, 502),
]


def _error_json(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "message": message},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    # ── Domain exceptions ───────────────────────────────────────────────

    for exc_type, code in _EXCEPTION_STATUS:

        def _make_handler(
            status_code: int,
        ):  # type: ignore[no-untyped-def]
            async def handler(request: Request, exc: Exception) -> JSONResponse:
                logger.warning("%s: %s", type(exc).__name__, exc)
                return _error_json(status_code, str(exc))

            return handler

        app.add_exception_handler(exc_type, _make_handler(code))

    # Upstream 404 passes through; any other upstream status is a bad gateway.
    @app.exception_handler(NonSuccessStatusError)
    async def non_success_handler(
        request: Request, exc: NonSuccessStatusError
    ) -> JSONResponse:
        logger.warning("%s: %s", type(exc).__name__, exc)
        status_code = 404 if exc.status_code == 404 else 502
        return _error_json(status_code, str(exc))

    # ── Catch-all for unexpected errors ─────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception")
        return _error_json(500, "An unexpected error occurred. Please try again later.")
