"""Instance metadata service adapters."""

from src.infrastructure.adapters.metadata.httpx_metadata_client import (
    HttpxInstanceMetadataClient,
)

__all__: list[str] = ["HttpxInstanceMetadataClient"]
