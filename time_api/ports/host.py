"""Host port interface.

Defines the protocol interface for host and process introspection.
"""

from __future__ import annotations

from typing import Protocol


class HostPort(Protocol):
    """Protocol interface for host identification and process uptime."""

    def hostname(self) -> str:
        """Get the machine hostname.

        Returns:
            str: Hostname of the machine running the service
        """
        ...

    def uptime_seconds(self) -> float:
        """Get how long the current process has been running.

        Returns:
            float: Process uptime in seconds
        """
        ...
