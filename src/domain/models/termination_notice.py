"""Termination notice decoded from the spot instance-action endpoint.

The metadata service answers ``GET /latest/meta-data/spot/instance-action``
with a small JSON document once the instance has been scheduled for an
involuntary action:

    {"action": "terminate", "time": "2026-01-15T10:02:00Z"}

``action`` is kept as an opaque label ("terminate", "stop", "hibernate",
or whatever the provider adds later). ``time`` must be an RFC 3339
timestamp carrying a UTC offset.

Note:
    A document can decode successfully and still describe an instant that
    is meaningless (e.g. the zero time ``0001-01-01T00:00:00Z``). Such a
    notice is still "present"; it simply never yields a countdown because
    it is not in the future.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from src.domain.errors.metadata import NoticeDecodeError

# date "T" time [fraction] offset, per RFC 3339 section 5.6
_RFC3339_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})$"
)


@dataclass(frozen=True)
class TerminationNotice:
    """A pending involuntary action on the instance.

    Attributes:
        action: Action announced by the provider (opaque label).
        time: When the action is scheduled to happen (timezone-aware).
    """

    action: str
    time: datetime

    def seconds_until(self, now: datetime) -> float:
        """Seconds between ``now`` and the scheduled time.

        Negative when the scheduled time has already passed.
        """
        return (self.time - now).total_seconds()


def parse_rfc3339(value: str) -> datetime:
    """Parse an RFC 3339 timestamp into an aware datetime.

    Args:
        value: Timestamp string such as ``2026-01-15T10:02:00Z``.

    Returns:
        Timezone-aware datetime.

    Raises:
        NoticeDecodeError: If the value is not a valid RFC 3339 timestamp.
    """
    if not _RFC3339_PATTERN.match(value):
        raise NoticeDecodeError(f"time {value!r} is not an RFC 3339 timestamp")
    try:
        return datetime.fromisoformat(value.upper())
    except ValueError as exc:
        raise NoticeDecodeError(f"time {value!r} is out of range: {exc}") from exc


def _require_string(document: dict[str, Any], key: str) -> str:
    if key not in document:
        raise NoticeDecodeError(f"missing required field {key!r}")
    value = document[key]
    if not isinstance(value, str):
        raise NoticeDecodeError(
            f"field {key!r} must be a string, got {type(value).__name__}"
        )
    return value


def decode_termination_notice(body: bytes | str) -> TerminationNotice:
    """Decode an instance-action response body.

    Args:
        body: Raw response body.

    Returns:
        The decoded TerminationNotice.

    Raises:
        NoticeDecodeError: If the body is not JSON, is not an object, or
            lacks a string ``action`` or a valid ``time``.
    """
    try:
        document = json.loads(body)
    except (ValueError, RecursionError) as exc:
        raise NoticeDecodeError(f"body is not valid JSON: {exc}") from exc

    if not isinstance(document, dict):
        raise NoticeDecodeError(
            f"body must be a JSON object, got {type(document).__name__}"
        )

    action = _require_string(document, "action")
    time = parse_rfc3339(_require_string(document, "time"))
    return TerminationNotice(action=action, time=time)
