"""Configuration module for the exporter.

Available Configurations:
- ExporterConfig: Metadata endpoint, probe timeout, listen address, logging mode
"""

from src.config.exporter_config import (
    DEFAULT_EXPORTER_CONFIG,
    DEFAULT_METADATA_ENDPOINT,
    ExporterConfig,
)

__all__ = [
    "ExporterConfig",
    "DEFAULT_EXPORTER_CONFIG",
    "DEFAULT_METADATA_ENDPOINT",
]
