"""Domain errors for the exporter.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from ExporterError.
"""

from src.domain.errors.configuration import ConfigurationError
from src.domain.errors.metadata import (
    MetadataServiceUnavailableError,
    NoticeDecodeError,
)

__all__: list[str] = [
    "ConfigurationError",
    "MetadataServiceUnavailableError",
    "NoticeDecodeError",
]
