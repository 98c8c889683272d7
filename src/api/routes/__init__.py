"""
API routes for the exporter.

Available routers:
- health: Liveness endpoint
- metrics: Prometheus exposition (path is configurable)
"""

from src.api.routes.health import router as health_router
from src.api.routes.metrics import build_metrics_router

__all__: list[str] = ["build_metrics_router", "health_router"]
