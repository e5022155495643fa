"""Clock and timezone port interfaces.

Defines the protocol interfaces for reading the host clock and resolving
the host timezone. Tests inject fixed implementations of these ports.
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Protocol


class ClockPort(Protocol):
    """Protocol interface for reading the current instant."""

    def now(self) -> datetime:
        """Sample the current instant.

        Returns:
            datetime: Timezone-aware current time in UTC
        """
        ...


class TimezonePort(Protocol):
    """Protocol interface for resolving the host timezone."""

    def local_zone(self) -> tzinfo:
        """Get the host's local timezone.

        Returns:
            tzinfo: Zone used to compute the local UTC offset
        """
        ...

    def zone_name(self) -> str | None:
        """Get the IANA name of the host's local timezone.

        Returns:
            str | None: IANA identifier, or None if it cannot be resolved
        """
        ...
