"""
API layer - FastAPI app serving the exporter's metrics.

This layer contains:
- The metrics and health routes
- Response models
- Correlation/logging middleware

IMPORT RULES:
- CAN import from: application, bootstrap
- CANNOT import from: infrastructure directly
"""

__all__: list[str] = []
