"""Domain models for termination notices and probe results."""

from src.domain.models.probe_result import ProbeOutcome, ProbeResult
from src.domain.models.termination_notice import (
    TerminationNotice,
    decode_termination_notice,
    parse_rfc3339,
)

__all__: list[str] = [
    "ProbeOutcome",
    "ProbeResult",
    "TerminationNotice",
    "decode_termination_notice",
    "parse_rfc3339",
]
