"""Outcome of one metadata probe cycle.

A ProbeResult is built fresh on every scrape and thrown away as soon as
its samples have been emitted. Nothing carries over between cycles.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from src.domain.models.termination_notice import TerminationNotice


class ProbeOutcome(str, Enum):
    """Mutually exclusive results of a probe.

    Values:
        UNREACHABLE: No HTTP response (timeout, refused, DNS failure).
        NO_NOTICE: The endpoint answered 404, no action is scheduled.
        NOTICE_UNPARSEABLE: A response arrived but its body is not a notice.
        NOTICE_PRESENT: A decodable termination notice is pending.
    """

    UNREACHABLE = "unreachable"
    NO_NOTICE = "no_notice"
    NOTICE_UNPARSEABLE = "notice_unparseable"
    NOTICE_PRESENT = "notice_present"


@dataclass(frozen=True)
class ProbeResult:
    """Classified result of a single probe.

    Attributes:
        outcome: Which of the four probe states was observed.
        observed_at: Instant the probe result was taken (after the response).
        status_code: HTTP status of the response, None when unreachable.
        notice: Decoded notice, only for NOTICE_PRESENT.
        seconds_remaining: Strictly positive countdown, only when the
            notice time lies in the future.
    """

    outcome: ProbeOutcome
    observed_at: datetime
    status_code: int | None = None
    notice: TerminationNotice | None = None
    seconds_remaining: float | None = None

    def __post_init__(self) -> None:
        """Validate the fields agree with the outcome."""
        if (self.outcome == ProbeOutcome.NOTICE_PRESENT) != (self.notice is not None):
            raise ValueError(
                f"notice must be set exactly when outcome is NOTICE_PRESENT, "
                f"got outcome={self.outcome.value}"
            )
        if self.seconds_remaining is not None:
            if self.notice is None:
                raise ValueError("seconds_remaining requires a notice")
            if self.seconds_remaining <= 0:
                raise ValueError(
                    f"seconds_remaining must be positive, got {self.seconds_remaining}"
                )

    @property
    def service_available(self) -> bool:
        return self.outcome != ProbeOutcome.UNREACHABLE

    @property
    def notice_present(self) -> bool:
        return self.outcome == ProbeOutcome.NOTICE_PRESENT

    @property
    def action_label(self) -> str:
        """Action label for the indicator gauge ("" without a notice)."""
        return self.notice.action if self.notice is not None else ""
