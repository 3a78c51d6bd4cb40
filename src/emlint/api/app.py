"""FastAPI application factory for emlint."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI

from emlint import __version__
from emlint.api.middleware import (
    RequestBodyLimitMiddleware,
    RequestTimingMiddleware,
    SecurityHeadersMiddleware,
)
from emlint.api.routers import contrast, reference, validate
from emlint.api.schemas import HealthResponse
from emlint.settings import Settings


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="emlint",
        description="Validates HTML email markup for structural and inline-style defects.",
        version=__version__,
    )
    app.state.settings = settings

    # Middleware
    app.add_middleware(RequestBodyLimitMiddleware, document_limit=settings.max_document_bytes)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestTimingMiddleware)

    app.include_router(validate.router, prefix="/validate", tags=["validate"])
    app.include_router(reference.router, prefix="/reference", tags=["reference"])
    app.include_router(contrast.router, prefix="/contrast", tags=["contrast"])

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__)

    return app


def main() -> None:
    """Run the REST API server using settings from environment / .env file."""
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger = logging.getLogger("emlint.api")
    logger.info(
        "emlint API Server v%s starting (host=%s, port=%d)",
        __version__, settings.api_server_host, settings.effective_port,
    )

    uvicorn.run(
        "emlint.api.app:create_app",
        factory=True,
        host=settings.api_server_host,
        port=settings.effective_port,
        log_level=settings.log_level.lower(),
    )
