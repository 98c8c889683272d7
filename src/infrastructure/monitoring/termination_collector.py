"""Prometheus collector for spot termination notices.

Implements the prometheus_client custom collector protocol. describe()
returns the three metric families without touching the network;
collect() runs one probe per scrape and turns the result into gauges:

    metadata_service_available           1 if the metadata service answered
    termination_imminent{instance_action} 1 with the action when a notice is
                                         pending, 0 with "" otherwise
    termination_in                       seconds until the notice time,
                                         only while it is still ahead

When the metadata service cannot be reached only
metadata_service_available (0) is emitted.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from prometheus_client.core import GaugeMetricFamily, Metric
from prometheus_client.registry import Collector

from src.application.services.base import LoggingMixin
from src.application.services.termination_probe_service import (
    TerminationProbeService,
)
from src.domain.models.probe_result import ProbeResult

METADATA_SERVICE_AVAILABLE = "metadata_service_available"
TERMINATION_IMMINENT = "termination_imminent"
TERMINATION_IN = "termination_in"

INSTANCE_ACTION_LABEL = "instance_action"

_HELP = {
    METADATA_SERVICE_AVAILABLE: "Metadata service available",
    TERMINATION_IMMINENT: "Instance is about to be terminated",
    TERMINATION_IN: "Instance will be terminated in",
}


def _service_available_family(value: float | None = None) -> GaugeMetricFamily:
    return GaugeMetricFamily(
        METADATA_SERVICE_AVAILABLE, _HELP[METADATA_SERVICE_AVAILABLE], value=value
    )


def _termination_imminent_family() -> GaugeMetricFamily:
    return GaugeMetricFamily(
        TERMINATION_IMMINENT,
        _HELP[TERMINATION_IMMINENT],
        labels=[INSTANCE_ACTION_LABEL],
    )


def _termination_in_family(value: float | None = None) -> GaugeMetricFamily:
    return GaugeMetricFamily(TERMINATION_IN, _HELP[TERMINATION_IN], value=value)


class TerminationCollector(LoggingMixin, Collector):
    """Custom collector exposing the termination probe as gauges.

    Safe to collect concurrently: every collect() builds its own
    ProbeResult and metric families, nothing is cached between scrapes.

    Usage:
        registry = CollectorRegistry()
        registry.register(TerminationCollector(probe_service))
    """

    def __init__(self, probe_service: TerminationProbeService, logger: Any = None) -> None:
        """Initialize the collector.

        Args:
            probe_service: Service that performs one probe per call.
            logger: Optional structlog logger (defaults to the global one).
        """
        self._probe_service = probe_service
        self._init_logger(component="collector", logger=logger)

    def describe(self) -> list[Metric]:
        """Return the metric families this collector can emit.

        Performs no I/O, so registration never triggers a probe.
        """
        return [
            _service_available_family(),
            _termination_imminent_family(),
            _termination_in_family(),
        ]

    def collect(self) -> Iterator[Metric]:
        """Probe the metadata service once and yield the resulting gauges."""
        result = self._probe_service.probe()
        families = self.families_for(result)
        self._log_operation("collect", outcome=result.outcome.value).debug(
            "termination_metrics_collected",
            families=[family.name for family in families],
        )
        yield from families

    @staticmethod
    def families_for(result: ProbeResult) -> list[Metric]:
        """Map a probe result onto metric families, in emission order."""
        families: list[Metric] = [
            _service_available_family(1.0 if result.service_available else 0.0)
        ]
        if not result.service_available:
            return families

        imminent = _termination_imminent_family()
        imminent.add_metric(
            [result.action_label], 1.0 if result.notice_present else 0.0
        )
        families.append(imminent)

        if result.seconds_remaining is not None:
            families.append(_termination_in_family(result.seconds_remaining))
        return families
