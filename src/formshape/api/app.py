"""FastAPI application factory for formshape."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI

from formshape import __version__
from formshape.api.middleware import RequestBodyLimitMiddleware, RequestTimingMiddleware
from formshape.api.routers import binders, transform
from formshape.api.schemas import HealthResponse
from formshape.settings import Settings


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="formshape",
        description="Normalizes validation error trees for UI form libraries.",
        version=__version__,
    )
    app.state.settings = settings

    # Middleware
    app.add_middleware(RequestTimingMiddleware)
    app.add_middleware(RequestBodyLimitMiddleware, max_bytes=settings.max_body_bytes)

    app.include_router(transform.router, tags=["transform"])
    app.include_router(binders.router, prefix="/binders", tags=["binders"])

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__)

    return app


def main() -> None:
    """Run the REST API server using settings from environment / .env file."""
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger = logging.getLogger("formshape.api")
    logger.info(
        "formshape API server v%s starting (host=%s, port=%d)",
        __version__, settings.api_server_host, settings.effective_port,
    )

    uvicorn.run(
        "formshape.api.app:create_app",
        factory=True,
        host=settings.api_server_host,
        port=settings.effective_port,
        log_level=settings.log_level.lower(),
    )
