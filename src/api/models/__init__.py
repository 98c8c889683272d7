"""
API models (Pydantic DTOs) used by the exporter's HTTP routes.
"""

from src.api.models.health import HealthResponse

__all__: list[str] = ["HealthResponse"]
