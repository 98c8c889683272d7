"""Bootstrap wiring for the termination exporter.

Construction and registration happen here, in one explicit call made by
the startup sequence with an explicit ExporterConfig.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx
from prometheus_client import CollectorRegistry

from src.application.ports.time_authority import TimeAuthorityProtocol
from src.application.services.termination_probe_service import (
    TerminationProbeService,
)
from src.application.services.time_authority_service import SystemTimeAuthority
from src.config.exporter_config import ExporterConfig
from src.infrastructure.adapters.metadata.httpx_metadata_client import (
    HttpxInstanceMetadataClient,
)
from src.infrastructure.monitoring.metrics import (
    METRICS_CONTENT_TYPE,
    create_registry,
    generate_metrics,
)
from src.infrastructure.monitoring.termination_collector import TerminationCollector


class PrometheusMetricsExporter:
    """Renders one registry in Prometheus exposition format."""

    def __init__(self, registry: CollectorRegistry) -> None:
        self._registry = registry

    @property
    def content_type(self) -> str:
        return METRICS_CONTENT_TYPE

    def generate_metrics(self) -> bytes:
        return generate_metrics(self._registry)


@dataclass
class TerminationExporter:
    """Everything the host needs to serve termination metrics.

    Attributes:
        config: Configuration the exporter was built from.
        registry: Registry holding the termination collector.
        collector: The registered termination collector.
        metadata_client: Shared HTTP client, closed by close().
        exporter: Renders the registry for the metrics route.
    """

    config: ExporterConfig
    registry: CollectorRegistry
    collector: TerminationCollector
    metadata_client: HttpxInstanceMetadataClient
    exporter: PrometheusMetricsExporter

    def close(self) -> None:
        """Release the metadata client's connection pool."""
        self.metadata_client.close()


def build_termination_exporter(
    config: ExporterConfig,
    *,
    registry: CollectorRegistry | None = None,
    transport: httpx.BaseTransport | None = None,
    time_authority: TimeAuthorityProtocol | None = None,
    logger: Any = None,
    include_runtime_metrics: bool = True,
) -> TerminationExporter:
    """Construct the termination collector and register it.

    Args:
        config: Exporter configuration (endpoint URL, timeout, ...).
        registry: Registry to register with. A new one is created when
            omitted.
        transport: Optional httpx transport (testing override).
        time_authority: Optional time source (testing override).
        logger: Optional structlog logger for probe and collector.
        include_runtime_metrics: Add process/platform collectors to a
            newly created registry.

    Returns:
        The wired exporter.
    """
    if registry is None:
        registry = create_registry(include_runtime_metrics=include_runtime_metrics)

    metadata_client = HttpxInstanceMetadataClient(config, transport=transport)
    probe_service = TerminationProbeService(
        metadata=metadata_client,
        time_authority=time_authority or SystemTimeAuthority(),
        logger=logger,
    )
    collector = TerminationCollector(probe_service, logger=logger)
    registry.register(collector)

    return TerminationExporter(
        config=config,
        registry=registry,
        collector=collector,
        metadata_client=metadata_client,
        exporter=PrometheusMetricsExporter(registry),
    )
