"""Errors raised while fetching and decoding instance metadata.

Neither error ever reaches the metrics registry: the probe service
catches both and turns them into gauge values.
"""

from src.domain.exceptions import ExporterError


class MetadataServiceUnavailableError(ExporterError):
    """The metadata service could not be reached.

    Covers timeouts, refused connections, DNS failures and malformed
    endpoint URLs: anything that prevents an HTTP response from arriving.

    Attributes:
        url: The endpoint that was being fetched.
    """

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch data from metadata service at {url}: {reason}")


class NoticeDecodeError(ExporterError):
    """The instance-action body is not a valid termination notice.

    The upstream service documents that the fields may be present but
    not meaningful, so this is treated as "no notice", never as fatal.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Couldn't parse instance-action metadata: {reason}")
