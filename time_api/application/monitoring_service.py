"""Application service for monitoring operations.

Answers the liveness probe. It has no dependency on the API document, so
the probe reports ok whether or not documentation loaded.
"""

from ..domain.models import HealthStatus
from ..ports.host import HostPort


class MonitoringService:
    """Application service that orchestrates monitoring operations."""

    def __init__(self, host: HostPort):
        """Initialize the monitoring service.

        Args:
            host: Port for process introspection
        """
        self._host = host

    def get_health_status(self) -> HealthStatus:
        """Get the liveness status of the process.

        Returns:
            HealthStatus: Always ``ok``, with process uptime in seconds
        """
        uptime = max(float(self._host.uptime_seconds()), 0.0)
        return HealthStatus(status="ok", uptime=round(uptime, 3))
