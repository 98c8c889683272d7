"""FastAPI application for the spot termination exporter."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from src import __version__
from src.api.middleware.logging_middleware import LoggingMiddleware
from src.api.routes.health import router as health_router
from src.api.routes.metrics import build_metrics_router
from src.bootstrap.metrics import TerminationExporter

log = structlog.get_logger()


def create_app(termination_exporter: TerminationExporter) -> FastAPI:
    """Create the exporter's FastAPI application.

    Args:
        termination_exporter: Wired exporter whose registry is served.
            Its HTTP client is closed when the application shuts down.

    Returns:
        The configured FastAPI app.
    """
    config = termination_exporter.config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info(
            "exporter_started",
            metadata_url=config.metadata_url,
            metrics_path=config.metrics_path,
            timeout_seconds=config.timeout_seconds,
        )
        try:
            yield
        finally:
            termination_exporter.close()
            log.info("exporter_stopped")

    app = FastAPI(
        title="Spot Termination Exporter",
        description="Prometheus exporter for spot instance termination notices",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.termination_exporter = termination_exporter
    app.add_middleware(LoggingMiddleware)
    app.include_router(health_router)
    app.include_router(build_metrics_router(config.metrics_path))
    return app
