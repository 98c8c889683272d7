"""Termination probe service: one metadata probe, classified.

Each call to probe() performs exactly one GET against the instance-action
endpoint and maps what comes back into a ProbeResult:

    no response       -> UNREACHABLE
    404               -> NO_NOTICE
    undecodable body  -> NOTICE_UNPARSEABLE  (any other status included)
    decodable notice  -> NOTICE_PRESENT, with a countdown if still ahead

Failures never escape probe(). A scrape must always get metric values,
and an ambiguous notice must never look like an imminent termination.
"""

from __future__ import annotations

from typing import Any

from src.application.ports.instance_metadata import InstanceMetadataPort
from src.application.ports.time_authority import TimeAuthorityProtocol
from src.application.services.base import LoggingMixin
from src.domain.errors.metadata import (
    MetadataServiceUnavailableError,
    NoticeDecodeError,
)
from src.domain.models.probe_result import ProbeOutcome, ProbeResult
from src.domain.models.termination_notice import decode_termination_notice


class TerminationProbeService(LoggingMixin):
    """Fetches and classifies the spot instance-action document.

    The service keeps no state between probes; concurrent calls share
    only the read-only metadata client and time authority.

    Example:
        >>> service = TerminationProbeService(
        ...     metadata=HttpxInstanceMetadataClient(config),
        ...     time_authority=SystemTimeAuthority(),
        ... )
        >>> result = service.probe()
        >>> result.outcome
        <ProbeOutcome.NO_NOTICE: 'no_notice'>
    """

    def __init__(
        self,
        metadata: InstanceMetadataPort,
        time_authority: TimeAuthorityProtocol,
        logger: Any = None,
    ) -> None:
        """Initialize the probe service.

        Args:
            metadata: Port used to fetch the instance-action document.
            time_authority: Source of "now" for the countdown.
            logger: Optional structlog logger (defaults to the global one).
        """
        self._metadata = metadata
        self._time = time_authority
        self._init_logger(component="probe", logger=logger)

    def probe(self) -> ProbeResult:
        """Run one probe cycle.

        Returns:
            The classified result. Never raises for transport, status or
            decode problems.
        """
        log = self._log_operation("probe", url=self._metadata.url)
        log.info("instance_action_fetch_started")

        try:
            response = self._metadata.fetch_instance_action()
        except MetadataServiceUnavailableError as exc:
            log.error("metadata_service_unreachable", reason=exc.reason)
            return ProbeResult(
                outcome=ProbeOutcome.UNREACHABLE,
                observed_at=self._time.utcnow(),
            )

        observed_at = self._time.utcnow()

        if response.is_not_found:
            log.debug("instance_action_not_found")
            return ProbeResult(
                outcome=ProbeOutcome.NO_NOTICE,
                observed_at=observed_at,
                status_code=response.status_code,
            )

        # Non-404 error statuses go through decoding like any other body.
        try:
            notice = decode_termination_notice(response.body)
        except NoticeDecodeError as exc:
            log.error(
                "instance_action_decode_failed",
                status_code=response.status_code,
                reason=exc.reason,
            )
            return ProbeResult(
                outcome=ProbeOutcome.NOTICE_UNPARSEABLE,
                observed_at=observed_at,
                status_code=response.status_code,
            )

        log.info(
            "instance_action_available",
            action=notice.action,
            termination_time=notice.time.isoformat(),
        )

        delta = notice.seconds_until(observed_at)
        return ProbeResult(
            outcome=ProbeOutcome.NOTICE_PRESENT,
            observed_at=observed_at,
            status_code=response.status_code,
            notice=notice,
            seconds_remaining=delta if delta > 0 else None,
        )
