"""System clock implementation of TimeAuthorityProtocol.

This is the only production module allowed to read the wall clock
directly. Everything else receives a TimeAuthorityProtocol.
"""

from datetime import datetime, timezone

from src.application.ports.time_authority import TimeAuthorityProtocol


class SystemTimeAuthority(TimeAuthorityProtocol):
    """Time authority backed by the host clock.

    Example:
        >>> authority = SystemTimeAuthority()
        >>> authority.utcnow().tzinfo is timezone.utc
        True
    """

    def utcnow(self) -> datetime:
        """Return the current time as an aware UTC datetime."""
        return datetime.now(timezone.utc)
