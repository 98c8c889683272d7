"""Application services."""

from src.application.services.termination_probe_service import (
    TerminationProbeService,
)
from src.application.services.time_authority_service import SystemTimeAuthority

__all__: list[str] = ["SystemTimeAuthority", "TerminationProbeService"]
