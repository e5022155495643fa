"""System adapter implementations.

Concrete implementations of the clock, timezone and host ports backed by
the operating system.
"""

from __future__ import annotations

import logging
import os
import socket
import time
from datetime import UTC, datetime, tzinfo

import psutil
import tzlocal

from ..ports.clock import ClockPort, TimezonePort
from ..ports.host import HostPort

logger = logging.getLogger(__name__)


class SystemClock(ClockPort):
    """Clock adapter returning the host system time in UTC."""

    def now(self) -> datetime:
        """Return current system time in UTC timezone."""
        return datetime.now(UTC)


class LocalTimezoneAdapter(TimezonePort):
    """Timezone adapter resolving the host zone with tzlocal.

    Falls back to UTC when the host zone cannot be determined, e.g. in a
    minimal container without ``/etc/localtime``.
    """

    def local_zone(self) -> tzinfo:
        try:
            return tzlocal.get_localzone()
        except (LookupError, ValueError, OSError) as e:
            logger.debug(f"Could not resolve local timezone, using UTC: {e}")
            return UTC

    def zone_name(self) -> str | None:
        try:
            return tzlocal.get_localzone_name()
        except (LookupError, ValueError, OSError) as e:
            logger.debug(f"Could not resolve local timezone name: {e}")
            return None


class SystemHostAdapter(HostPort):
    """Host adapter using the socket module and psutil process information."""

    def __init__(self, pid: int | None = None):
        """Initialize the host adapter.

        Args:
            pid: Process to report uptime for, defaults to the current process
        """
        process = psutil.Process(pid if pid is not None else os.getpid())
        self._process_started_at = process.create_time()

    def hostname(self) -> str:
        return socket.gethostname()

    def uptime_seconds(self) -> float:
        """Seconds elapsed since the OS started this process."""
        return time.time() - self._process_started_at
