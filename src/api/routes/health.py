"""Liveness endpoint for the exporter.

Does not probe the metadata service; a scrape of the metrics path is the
only thing that triggers a probe.
"""

from fastapi import APIRouter

from src import __version__
from src.api.models.health import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Return health status.

    Returns:
        Health status with 200 OK.
    """
    return HealthResponse(status="ok", version=__version__)
