"""Infrastructure monitoring components.

Prometheus collector for spot termination notices and the registry
helpers used to expose it.
"""

from src.infrastructure.monitoring.metrics import (
    METRICS_CONTENT_TYPE,
    create_registry,
    generate_metrics,
)
from src.infrastructure.monitoring.termination_collector import (
    INSTANCE_ACTION_LABEL,
    METADATA_SERVICE_AVAILABLE,
    TERMINATION_IMMINENT,
    TERMINATION_IN,
    TerminationCollector,
)

__all__ = [
    # Registry helpers
    "METRICS_CONTENT_TYPE",
    "create_registry",
    "generate_metrics",
    # Termination collector
    "INSTANCE_ACTION_LABEL",
    "METADATA_SERVICE_AVAILABLE",
    "TERMINATION_IMMINENT",
    "TERMINATION_IN",
    "TerminationCollector",
]
