"""Prometheus registry infrastructure for the exporter.

The exporter serves its own CollectorRegistry rather than the global
default one, so tests and embedding hosts get isolated registries and
nothing is registered as an import side effect.
"""

from prometheus_client import (
    CollectorRegistry,
    PlatformCollector,
    ProcessCollector,
    generate_latest,
)

# Content type for Prometheus metrics endpoint
METRICS_CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"


def create_registry(include_runtime_metrics: bool = True) -> CollectorRegistry:
    """Create a fresh registry for the exporter.

    Args:
        include_runtime_metrics: Also register the process_* and
            python_info collectors describing the exporter itself.

    Returns:
        A new CollectorRegistry.
    """
    registry = CollectorRegistry()
    if include_runtime_metrics:
        ProcessCollector(registry=registry)
        PlatformCollector(registry=registry)
    return registry


def generate_metrics(registry: CollectorRegistry) -> bytes:
    """Generate Prometheus exposition output for a registry.

    Every call collects every registered collector, so each call
    triggers exactly one termination probe.

    Args:
        registry: Registry to collect.

    Returns:
        Metrics in Prometheus text format.
    """
    return generate_latest(registry)
