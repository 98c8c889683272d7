"""Composition root for wiring dependencies.

This package centralizes infrastructure-aware wiring so the API layer
depends on a ready-made exporter instead of building adapters itself.
"""

from src.bootstrap.logging import configure_logging
from src.bootstrap.metrics import (
    PrometheusMetricsExporter,
    TerminationExporter,
    build_termination_exporter,
)

__all__: list[str] = [
    "PrometheusMetricsExporter",
    "TerminationExporter",
    "build_termination_exporter",
    "configure_logging",
]
