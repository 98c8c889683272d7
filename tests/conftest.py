"""
Pytest configuration and shared fixtures for exporter tests.

Testing Standards:
- Unit tests go in tests/unit/
- No test touches the network: httpx is faked with MockTransport
- Time-dependent tests use FakeTimeAuthority
"""

import logging
from collections.abc import Iterator
from datetime import datetime, timezone
from typing import Any

import pytest
import structlog
from structlog.testing import LogCapture

from tests.helpers import FakeTimeAuthority

FROZEN_NOW = datetime(2026, 1, 15, 10, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from src import __version__

    return __version__


@pytest.fixture
def fake_time_authority() -> FakeTimeAuthority:
    """Time authority frozen at 2026-01-15T10:00:00Z."""
    return FakeTimeAuthority(frozen_at=FROZEN_NOW)


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def log_capture() -> LogCapture:
    """Collect structlog events emitted through capturing_logger."""
    return LogCapture()


@pytest.fixture
def capturing_logger(log_capture: LogCapture) -> Any:
    """Logger to inject into services; every event lands in log_capture."""
    return structlog.wrap_logger(
        None,
        processors=[log_capture],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
    )
