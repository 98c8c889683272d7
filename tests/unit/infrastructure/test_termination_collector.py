"""Unit tests for TerminationCollector.

Checks the exact samples produced for each probe outcome, that describe()
never probes, and that collections are independent of each other.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Any

import pytest
from prometheus_client import CollectorRegistry, generate_latest
from prometheus_client.core import Metric
from structlog.testing import LogCapture

from src.application.services.termination_probe_service import (
    TerminationProbeService,
)
from src.infrastructure.monitoring.termination_collector import (
    INSTANCE_ACTION_LABEL,
    METADATA_SERVICE_AVAILABLE,
    TERMINATION_IMMINENT,
    TERMINATION_IN,
    TerminationCollector,
)
from tests.helpers import FakeInstanceMetadata, FakeTimeAuthority


def _collector(
    metadata: FakeInstanceMetadata,
    time_authority: FakeTimeAuthority,
    logger: Any = None,
) -> TerminationCollector:
    service = TerminationProbeService(
        metadata=metadata, time_authority=time_authority, logger=logger
    )
    return TerminationCollector(service, logger=logger)


def _samples(families: list[Metric]) -> list[tuple[str, dict[str, str], float]]:
    return [
        (sample.name, dict(sample.labels), sample.value)
        for family in families
        for sample in family.samples
    ]


class TestDescribe:
    """Tests for describe()."""

    def test_returns_three_descriptors(self, fake_time_authority: FakeTimeAuthority) -> None:
        """Test all three metric families are described."""
        collector = _collector(FakeInstanceMetadata.down(), fake_time_authority)

        families = collector.describe()

        assert [family.name for family in families] == [
            METADATA_SERVICE_AVAILABLE,
            TERMINATION_IMMINENT,
            TERMINATION_IN,
        ]
        assert all(family.type == "gauge" for family in families)
        assert all(family.samples == [] for family in families)

    def test_describe_performs_no_probe(self, fake_time_authority: FakeTimeAuthority) -> None:
        """Test describe() works with no metadata service and never fetches."""
        metadata = FakeInstanceMetadata.down()
        collector = _collector(metadata, fake_time_authority)

        collector.describe()
        collector.describe()

        assert metadata.fetch_count == 0

    def test_registration_performs_no_probe(
        self, fake_time_authority: FakeTimeAuthority
    ) -> None:
        """Test registering with a registry only describes."""
        metadata = FakeInstanceMetadata.down()
        registry = CollectorRegistry()

        registry.register(_collector(metadata, fake_time_authority))

        assert metadata.fetch_count == 0

    def test_help_text(self, fake_time_authority: FakeTimeAuthority) -> None:
        """Test help strings describe each gauge."""
        families = _collector(FakeInstanceMetadata.down(), fake_time_authority).describe()

        assert [family.documentation for family in families] == [
            "Metadata service available",
            "Instance is about to be terminated",
            "Instance will be terminated in",
        ]


class TestCollect:
    """Tests for collect() across probe outcomes."""

    def test_unreachable_emits_single_sample(
        self, fake_time_authority: FakeTimeAuthority
    ) -> None:
        """Test transport failures yield only metadata_service_available 0."""
        collector = _collector(FakeInstanceMetadata.down(), fake_time_authority)

        samples = _samples(list(collector.collect()))

        assert samples == [(METADATA_SERVICE_AVAILABLE, {}, 0.0)]

    def test_not_found(self, fake_time_authority: FakeTimeAuthority) -> None:
        """Test a 404 yields available 1 and imminent 0 with empty label."""
        collector = _collector(FakeInstanceMetadata.not_found(), fake_time_authority)

        samples = _samples(list(collector.collect()))

        assert samples == [
            (METADATA_SERVICE_AVAILABLE, {}, 1.0),
            (TERMINATION_IMMINENT, {INSTANCE_ACTION_LABEL: ""}, 0.0),
        ]

    def test_future_notice(self, fake_time_authority: FakeTimeAuthority) -> None:
        """Test a pending notice yields all three samples."""
        metadata = FakeInstanceMetadata.with_notice("terminate", "2026-01-15T10:02:00Z")

        samples = _samples(list(_collector(metadata, fake_time_authority).collect()))

        assert samples[:2] == [
            (METADATA_SERVICE_AVAILABLE, {}, 1.0),
            (TERMINATION_IMMINENT, {INSTANCE_ACTION_LABEL: "terminate"}, 1.0),
        ]
        name, labels, value = samples[2]
        assert (name, labels) == (TERMINATION_IN, {})
        assert value == pytest.approx(120.0)
        assert len(samples) == 3

    def test_past_notice_omits_countdown(self, fake_time_authority: FakeTimeAuthority) -> None:
        """Test a notice in the past yields no termination_in sample."""
        metadata = FakeInstanceMetadata.with_notice("stop", "2026-01-15T09:00:00Z")

        samples = _samples(list(_collector(metadata, fake_time_authority).collect()))

        assert samples == [
            (METADATA_SERVICE_AVAILABLE, {}, 1.0),
            (TERMINATION_IMMINENT, {INSTANCE_ACTION_LABEL: "stop"}, 1.0),
        ]

    @pytest.mark.parametrize(
        "body,status_code",
        [
            ("not json", 200),
            ('{"action": "terminate"}', 200),
            ('{"action": "x", "time": ""}', 200),
            ("[" * 200_000 + "]" * 200_000, 500),
        ],
        ids=["text", "missing-time", "empty-time", "deeply-nested"],
    )
    def test_malformed_body(
        self, body: str, status_code: int, fake_time_authority: FakeTimeAuthority
    ) -> None:
        """Test decode failures look exactly like "no notice"."""
        collector = _collector(
            FakeInstanceMetadata.with_body(body, status_code=status_code), fake_time_authority
        )

        samples = _samples(list(collector.collect()))

        assert samples == [
            (METADATA_SERVICE_AVAILABLE, {}, 1.0),
            (TERMINATION_IMMINENT, {INSTANCE_ACTION_LABEL: ""}, 0.0),
        ]

    def test_repeated_unreachable_collections_are_identical(
        self, fake_time_authority: FakeTimeAuthority
    ) -> None:
        """Test no state leaks between collections."""
        collector = _collector(FakeInstanceMetadata.down(), fake_time_authority)

        runs = [_samples(list(collector.collect())) for _ in range(5)]

        assert all(run == [(METADATA_SERVICE_AVAILABLE, {}, 0.0)] for run in runs)

    def test_concurrent_collections(self, fake_time_authority: FakeTimeAuthority) -> None:
        """Test concurrent collect() calls are independent."""
        metadata = FakeInstanceMetadata.with_notice("terminate", "2026-01-15T10:02:00Z")
        collector = _collector(metadata, fake_time_authority)

        with ThreadPoolExecutor(max_workers=4) as pool:
            runs = list(pool.map(lambda _: _samples(list(collector.collect())), range(8)))

        assert all(run == runs[0] for run in runs)
        assert len(runs[0]) == 3

    def test_collect_logs_outcome(
        self,
        fake_time_authority: FakeTimeAuthority,
        capturing_logger: Any,
        log_capture: LogCapture,
    ) -> None:
        """Test each collection logs its outcome through the injected logger."""
        collector = _collector(
            FakeInstanceMetadata.not_found(), fake_time_authority, capturing_logger
        )

        list(collector.collect())

        collected = [e for e in log_capture.entries if e["event"] == "termination_metrics_collected"]
        assert len(collected) == 1
        assert collected[0]["outcome"] == "no_notice"
        assert collected[0]["families"] == [METADATA_SERVICE_AVAILABLE, TERMINATION_IMMINENT]


class TestRegistryIntegration:
    """Tests for the collector behind a CollectorRegistry."""

    def test_sample_values_through_registry(
        self, fake_time_authority: FakeTimeAuthority
    ) -> None:
        """Test values are readable through the registry."""
        metadata = FakeInstanceMetadata.with_notice("hibernate", "2026-01-15T10:00:30Z")
        registry = CollectorRegistry()
        registry.register(_collector(metadata, fake_time_authority))

        assert registry.get_sample_value(METADATA_SERVICE_AVAILABLE) == 1.0
        assert (
            registry.get_sample_value(TERMINATION_IMMINENT, {INSTANCE_ACTION_LABEL: "hibernate"})
            == 1.0
        )
        assert registry.get_sample_value(TERMINATION_IN) == pytest.approx(30.0)

    def test_exposition_format(self, fake_time_authority: FakeTimeAuthority) -> None:
        """Test the text exposition of a 404 probe."""
        registry = CollectorRegistry()
        registry.register(_collector(FakeInstanceMetadata.not_found(), fake_time_authority))

        output = generate_latest(registry).decode("utf-8")

        assert "# TYPE metadata_service_available gauge" in output
        assert "metadata_service_available 1.0" in output
        assert 'termination_imminent{instance_action=""} 0.0' in output
        assert "termination_in " not in output

    def test_unreachable_exposition(self, fake_time_authority: FakeTimeAuthority) -> None:
        """Test only the availability gauge is exposed when unreachable."""
        registry = CollectorRegistry()
        registry.register(_collector(FakeInstanceMetadata.down(), fake_time_authority))

        output = generate_latest(registry).decode("utf-8")

        assert "metadata_service_available 0.0" in output
        assert "termination_imminent{" not in output
