"""Application service building time payloads.

Samples the clock exactly once per payload and derives every representation
from that single instant.
"""

from __future__ import annotations

import logging

from ..domain.models import ServerInfo, TimePayload
from ..ports.clock import ClockPort, TimezonePort
from ..ports.host import HostPort
from ..utils.timezone import (
    format_utc_offset,
    to_epoch_millis,
    to_local_iso,
    to_rfc1123,
    utc_offset_minutes,
)

logger = logging.getLogger(__name__)

FALLBACK_ZONE_NAME = "UTC"


class TimePayloadBuilder:
    """Application service that turns the current instant into a TimePayload."""

    def __init__(
        self,
        clock: ClockPort,
        timezone: TimezonePort,
        host: HostPort,
        environment: str = "production",
    ):
        """Initialize the builder.

        Args:
            clock: Port for reading the current instant
            timezone: Port for resolving the host timezone
            host: Port for host identification
            environment: Deployment environment label reported in payloads
        """
        self._clock = clock
        self._timezone = timezone
        self._host = host
        self._environment = environment

    def build(self) -> TimePayload:
        """Build a time payload for the current instant.

        Returns:
            TimePayload: All representations of one sampled instant
        """
        instant = self._clock.now()

        offset_minutes = utc_offset_minutes(instant, self._timezone.local_zone())
        zone_name = self._timezone.zone_name() or FALLBACK_ZONE_NAME

        return TimePayload(
            iso=to_local_iso(instant, offset_minutes),
            utc=to_rfc1123(instant),
            epoch_millis=to_epoch_millis(instant),
            timezone=zone_name,
            utc_offset=format_utc_offset(offset_minutes),
            server=ServerInfo(hostname=self._host.hostname(), env=self._environment),
        )
