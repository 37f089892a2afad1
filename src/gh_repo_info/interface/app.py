"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from gh_repo_info.interface.dependencies import shutdown, startup
from gh_repo_info.interface.error_handlers import register_error_handlers
from gh_repo_info.interface.routes import router


def create_app(*, transport: httpx.AsyncBaseTransport | None = None) -> FastAPI:
    """Build and wire the FastAPI application.

    ``transport`` replaces the network layer of the shared GitHub client;
    uvicorn calls the factory without it.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await startup(transport=transport)
        yield
        await shutdown()

    app = FastAPI(
        title="GitHub Repo Info",
        version="0.1.0",
        description=(
            "Looks up a single GitHub repository and returns its metadata: "
            "owner, star / fork / issue counts, license, language and topics."
        ),
        lifespan=lifespan,
    )

    register_error_handlers(app)
    app.include_router(router)

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
