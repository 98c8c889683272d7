"""httpx adapter for the instance metadata service.

Implements InstanceMetadataPort with a single shared httpx.Client. The
client is thread-safe, so one instance serves concurrent scrapes and
reuses its connection pool between them.
"""

from __future__ import annotations

import time
from types import TracebackType

import httpx

from src.application.ports.instance_metadata import MetadataResponse
from src.config.exporter_config import ExporterConfig
from src.domain.errors.metadata import MetadataServiceUnavailableError

# instance-action documents are well under 1 KiB
MAX_BODY_BYTES = 64 * 1024


class HttpxInstanceMetadataClient:
    """Fetches the spot instance-action document over HTTP.

    Usage:
        client = HttpxInstanceMetadataClient(config)
        try:
            response = client.fetch_instance_action()
        finally:
            client.close()

    Attributes:
        url: The instance-action endpoint.
        timeout_seconds: Deadline for the whole request, body included.
            httpx only bounds each connect or read step, so the body is
            streamed and the deadline checked between chunks.
    """

    def __init__(
        self,
        config: ExporterConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the metadata client.

        Args:
            config: Exporter configuration (endpoint URL and timeout).
            transport: Optional httpx transport, used by tests to fake
                the metadata service.
        """
        self._url = config.metadata_url
        self.timeout_seconds = config.timeout_seconds
        self._client = httpx.Client(
            timeout=httpx.Timeout(config.timeout_seconds),
            transport=transport,
            follow_redirects=False,
        )

    @property
    def url(self) -> str:
        return self._url

    def fetch_instance_action(self) -> MetadataResponse:
        """GET the instance-action endpoint once.

        Returns:
            The response status and body, whatever the status is. Bodies
            longer than MAX_BODY_BYTES are truncated.

        Raises:
            MetadataServiceUnavailableError: On timeout, connection or DNS
                failure, an unusable URL, or when the body is still arriving
                at the deadline.
        """
        deadline = time.monotonic() + self.timeout_seconds
        try:
            with self._client.stream("GET", self._url) as response:
                body = self._read_body(response, deadline)
        except (httpx.TransportError, httpx.InvalidURL) as exc:
            raise MetadataServiceUnavailableError(
                self._url, f"{type(exc).__name__}: {exc}"
            ) from exc
        return MetadataResponse(status_code=response.status_code, body=body)

    def _read_body(self, response: httpx.Response, deadline: float) -> bytes:
        self._check_deadline(deadline)
        body = bytearray()
        for chunk in response.iter_bytes():
            body.extend(chunk)
            if len(body) >= MAX_BODY_BYTES:
                return bytes(body[:MAX_BODY_BYTES])
            self._check_deadline(deadline)
        return bytes(body)

    def _check_deadline(self, deadline: float) -> None:
        if time.monotonic() > deadline:
            raise MetadataServiceUnavailableError(
                self._url,
                f"response not complete within {self.timeout_seconds}s",
            )

    def close(self) -> None:
        """Close the underlying connection pool."""
        self._client.close()

    def __enter__(self) -> HttpxInstanceMetadataClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
