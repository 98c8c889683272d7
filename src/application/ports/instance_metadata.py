"""Instance metadata port - contract for fetching the instance-action document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class MetadataResponse:
    """A completed HTTP round trip to the metadata service.

    Attributes:
        status_code: HTTP status returned by the service.
        body: Full response body.
    """

    status_code: int
    body: bytes

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


class InstanceMetadataPort(Protocol):
    """Protocol for reading the spot instance-action endpoint."""

    @property
    def url(self) -> str:
        """Endpoint being fetched (for logging)."""
        ...

    def fetch_instance_action(self) -> MetadataResponse:
        """Perform exactly one bounded GET against the endpoint.

        Returns:
            The response, whatever its status code.

        Raises:
            MetadataServiceUnavailableError: If no response arrived.
        """
        ...


__all__ = ["InstanceMetadataPort", "MetadataResponse"]
