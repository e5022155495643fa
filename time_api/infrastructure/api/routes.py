"""API routes for the time service.

This module defines the liveness, time and redirect routes, keeping the web
framework concerns separate from the payload computation.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ...application.monitoring_service import MonitoringService
from ...application.time_payload_builder import TimePayloadBuilder
from .dependencies import get_monitoring_service, get_time_payload_builder

logger = logging.getLogger(__name__)

DOCS_PATH = "/docs"


# Response models for API (DTOs)
class HealthResponse(BaseModel):
    """API response model for health endpoint."""

    status: str
    uptime: float


class ServerInfoResponse(BaseModel):
    """Host identification block of the time response."""

    hostname: str
    env: str


class TimeResponse(BaseModel):
    """API response model for the time endpoint, serialized in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    iso: str
    utc: str
    epoch_millis: int
    timezone: str
    utc_offset: str
    server: ServerInfoResponse


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(
    monitoring_service: MonitoringService = Depends(get_monitoring_service),  # noqa: B008
) -> HealthResponse:
    """Liveness probe with process uptime."""
    health_status = monitoring_service.get_health_status()
    return HealthResponse(status=health_status.status, uptime=health_status.uptime)


@router.get("/api/v1/time", response_model=TimeResponse)
async def current_time(
    builder: TimePayloadBuilder = Depends(get_time_payload_builder),  # noqa: B008
) -> TimeResponse:
    """Current server time in several representations."""
    payload = builder.build()
    return TimeResponse(
        iso=payload.iso,
        utc=payload.utc,
        epoch_millis=payload.epoch_millis,
        timezone=payload.timezone,
        utc_offset=payload.utc_offset,
        server=ServerInfoResponse(hostname=payload.server.hostname, env=payload.server.env),
    )


@router.get("/", include_in_schema=False)
async def root() -> RedirectResponse:
    """Redirect to the documentation browser."""
    return RedirectResponse(url=DOCS_PATH, status_code=status.HTTP_302_FOUND)
