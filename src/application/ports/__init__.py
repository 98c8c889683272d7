"""Application ports - Abstract interfaces for infrastructure adapters.

This module defines the contracts that infrastructure adapters must implement.
Ports enable dependency inversion and make the application layer testable.

Available ports:
- InstanceMetadataPort: Fetch the spot instance-action document
- TimeAuthorityProtocol: Source of "now" for countdown computation
"""

from src.application.ports.instance_metadata import (
    InstanceMetadataPort,
    MetadataResponse,
)
from src.application.ports.time_authority import TimeAuthorityProtocol

__all__: list[str] = [
    "InstanceMetadataPort",
    "MetadataResponse",
    "TimeAuthorityProtocol",
]
