"""Time Authority Protocol - interface for the probe's time source.

The countdown gauge is ``notice.time - now``. Reading "now" through this
port instead of calling datetime.now() directly lets tests freeze the
clock and assert exact countdown values.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class TimeAuthorityProtocol(ABC):
    """Abstract interface for time authority.

    Example usage:
        class MyService:
            def __init__(self, time_authority: TimeAuthorityProtocol) -> None:
                self._time = time_authority

            def process(self) -> None:
                now = self._time.utcnow()  # NOT datetime.now()
                ...

    For production:
        Use SystemTimeAuthority from src/application/services/

    For testing:
        Use FakeTimeAuthority from tests/helpers/fake_time_authority.py
    """

    @abstractmethod
    def utcnow(self) -> datetime:
        """Return current UTC time.

        Returns:
            Current datetime in UTC timezone.

        Note:
            This should always return a timezone-aware datetime in UTC.
        """
        ...
