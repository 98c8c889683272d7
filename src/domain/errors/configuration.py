"""Configuration errors raised at startup."""

from src.domain.exceptions import ExporterError


class ConfigurationError(ExporterError, ValueError):
    """Exporter configuration is invalid.

    Also a ValueError so callers validating plain values can catch it
    without importing domain types.
    """
