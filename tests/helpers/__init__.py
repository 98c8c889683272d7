"""Test helpers for exporter tests.

This package contains reusable test utilities and fake implementations
for dependency injection in unit tests.

Helpers:
    FakeTimeAuthority: Controllable time authority for deterministic tests
    FakeInstanceMetadata: Scripted InstanceMetadataPort
    metadata_transport: httpx.MockTransport factory for the httpx adapter

Usage:
    from tests.helpers import FakeTimeAuthority
"""

from tests.helpers.fake_instance_metadata import (
    FakeInstanceMetadata,
    metadata_transport,
)
from tests.helpers.fake_time_authority import FakeTimeAuthority

__all__ = ["FakeInstanceMetadata", "FakeTimeAuthority", "metadata_transport"]
