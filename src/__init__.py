"""
Spot Termination Exporter - Prometheus exporter for spot instance reclaim notices

Probes the cloud instance metadata service on every scrape and reports
whether a termination notice is pending, which action it announces, and
how many seconds remain before the instance goes away.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
