"""Unit tests for exporter construction and registration."""

import pytest
from prometheus_client import CollectorRegistry

from src.bootstrap.metrics import (
    PrometheusMetricsExporter,
    TerminationExporter,
    build_termination_exporter,
)
from src.config.exporter_config import ExporterConfig
from src.infrastructure.monitoring.termination_collector import TerminationCollector
from tests.helpers import FakeTimeAuthority, metadata_transport


class TestBuildTerminationExporter:
    """Tests for build_termination_exporter()."""

    def test_registers_collector_on_given_registry(self) -> None:
        """Test the collector is registered exactly where asked."""
        registry = CollectorRegistry()

        exporter = build_termination_exporter(
            ExporterConfig(), registry=registry, transport=metadata_transport()
        )

        assert isinstance(exporter, TerminationExporter)
        assert isinstance(exporter.collector, TerminationCollector)
        assert exporter.registry is registry
        assert registry.get_sample_value("metadata_service_available") == 1.0

    def test_registration_does_not_probe(self) -> None:
        """Test building the exporter sends no request."""
        seen: list = []

        build_termination_exporter(
            ExporterConfig(), transport=metadata_transport(requests=seen)
        )

        assert seen == []

    def test_double_registration_rejected(self) -> None:
        """Test two collectors cannot share one registry."""
        registry = CollectorRegistry()
        build_termination_exporter(
            ExporterConfig(), registry=registry, transport=metadata_transport()
        )

        with pytest.raises(ValueError, match="Duplicated timeseries"):
            build_termination_exporter(
                ExporterConfig(), registry=registry, transport=metadata_transport()
            )

    def test_uses_injected_time_authority(self, fake_time_authority: FakeTimeAuthority) -> None:
        """Test the countdown is computed against the injected clock."""
        exporter = build_termination_exporter(
            ExporterConfig(),
            transport=metadata_transport(
                200, json_body={"action": "terminate", "time": "2026-01-15T10:01:00Z"}
            ),
            time_authority=fake_time_authority,
            include_runtime_metrics=False,
        )

        assert exporter.registry.get_sample_value("termination_in") == pytest.approx(60.0)

    def test_default_registry_has_runtime_metrics(self) -> None:
        exporter = build_termination_exporter(ExporterConfig(), transport=metadata_transport())

        output = exporter.exporter.generate_metrics().decode("utf-8")

        assert "python_info" in output
        assert "metadata_service_available 1.0" in output

    def test_close_releases_client(self) -> None:
        """Test close() shuts the shared HTTP client."""
        exporter = build_termination_exporter(ExporterConfig(), transport=metadata_transport())

        exporter.close()

        with pytest.raises(RuntimeError):
            exporter.metadata_client.fetch_instance_action()


class TestPrometheusMetricsExporter:
    """Tests for PrometheusMetricsExporter."""

    def test_content_type(self) -> None:
        exporter = PrometheusMetricsExporter(CollectorRegistry())

        assert exporter.content_type.startswith("text/plain")

    def test_generates_registry_output(self) -> None:
        exporter = PrometheusMetricsExporter(CollectorRegistry())

        assert exporter.generate_metrics() == b""
