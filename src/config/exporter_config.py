"""Exporter configuration.

This module defines the exporter's runtime configuration with environment
variable overrides. The startup sequence builds one ExporterConfig and
passes it explicitly to everything it constructs.

Environment Variables:
- METADATA_ENDPOINT: instance-action URL
  (default: http://169.254.169.254/latest/meta-data/spot/instance-action)
- METADATA_TIMEOUT_SECONDS: bound on each probe request (default: 1.0)
- EXPORTER_LISTEN_HOST: address the HTTP server binds (default: 0.0.0.0)
- EXPORTER_LISTEN_PORT: port the HTTP server binds (default: 9189)
- EXPORTER_METRICS_PATH: path serving the exposition (default: /metrics)
- ENVIRONMENT: "production" for JSON logs, anything else for console logs
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from urllib.parse import urlparse

from src.domain.errors.configuration import ConfigurationError

DEFAULT_METADATA_ENDPOINT = "http://169.254.169.254/latest/meta-data/spot/instance-action"
DEFAULT_TIMEOUT_SECONDS = 1.0
DEFAULT_LISTEN_HOST = "0.0.0.0"
DEFAULT_LISTEN_PORT = 9189
DEFAULT_METRICS_PATH = "/metrics"
DEFAULT_ENVIRONMENT = "production"

# Served by the health route, so the metrics path cannot take it
HEALTH_PATH = "/health"


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_float_env(key: str, default: float) -> float:
    """Get float environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed float value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class ExporterConfig:
    """Configuration for the termination exporter.

    Attributes:
        metadata_url: instance-action endpoint probed on every scrape.
        timeout_seconds: Bound on each probe request. Kept short because
            the probe runs inline with the scrape.
        listen_host: Address the HTTP server binds.
        listen_port: Port the HTTP server binds.
        metrics_path: Path serving the Prometheus exposition.
        environment: Selects JSON ("production") or console log output.
    """

    metadata_url: str = DEFAULT_METADATA_ENDPOINT
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    listen_host: str = DEFAULT_LISTEN_HOST
    listen_port: int = DEFAULT_LISTEN_PORT
    metrics_path: str = DEFAULT_METRICS_PATH
    environment: str = DEFAULT_ENVIRONMENT

    def __post_init__(self) -> None:
        """Validate configuration values."""
        parsed = urlparse(self.metadata_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigurationError(
                f"metadata_url must be an http(s) URL, got {self.metadata_url!r}"
            )
        if not (math.isfinite(self.timeout_seconds) and self.timeout_seconds > 0):
            raise ConfigurationError(
                f"timeout_seconds must be a positive finite number, got {self.timeout_seconds}"
            )
        if not self.listen_host:
            raise ConfigurationError("listen_host must not be empty")
        if not 1 <= self.listen_port <= 65535:
            raise ConfigurationError(
                f"listen_port must be between 1 and 65535, got {self.listen_port}"
            )
        if not self.metrics_path.startswith("/") or self.metrics_path == "/":
            raise ConfigurationError(
                f"metrics_path must be an absolute path below '/', got {self.metrics_path!r}"
            )
        if self.metrics_path == HEALTH_PATH:
            raise ConfigurationError(f"metrics_path cannot be {HEALTH_PATH!r}")

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @classmethod
    def from_environment(cls) -> "ExporterConfig":
        """Create config from environment variables with defaults.

        Returns:
            ExporterConfig with values from environment or defaults.

        Raises:
            ConfigurationError: If a provided value fails validation.
        """
        return cls(
            metadata_url=os.environ.get("METADATA_ENDPOINT", DEFAULT_METADATA_ENDPOINT),
            timeout_seconds=_get_float_env(
                "METADATA_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS
            ),
            listen_host=os.environ.get("EXPORTER_LISTEN_HOST", DEFAULT_LISTEN_HOST),
            listen_port=_get_int_env("EXPORTER_LISTEN_PORT", DEFAULT_LISTEN_PORT),
            metrics_path=os.environ.get("EXPORTER_METRICS_PATH", DEFAULT_METRICS_PATH),
            environment=os.environ.get("ENVIRONMENT", DEFAULT_ENVIRONMENT),
        )


DEFAULT_EXPORTER_CONFIG = ExporterConfig()
