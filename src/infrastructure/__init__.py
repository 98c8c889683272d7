"""
Infrastructure layer - External adapters for the exporter.

This layer contains:
- httpx adapter for the instance metadata service
- Prometheus collector and registry helpers
- structlog configuration and correlation IDs

IMPORT RULES:
- CAN import from: domain, application
- Implements ports defined in application layer
"""
