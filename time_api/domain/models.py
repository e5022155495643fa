"""Domain models for the Server Time API.

This module contains the value objects produced and consumed by the service,
validated with strict Pydantic v2 models.
Domain models are free from any infrastructure dependencies.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

UTC_OFFSET_PATTERN = r"^[+-]\d{2}:[0-5]\d$"


class ServerInfo(BaseModel):
    """Value object identifying the host that answered a request."""

    model_config = ConfigDict(strict=True, frozen=True)

    hostname: str = Field(..., description="Machine hostname")
    env: str = Field(..., description="Deployment environment label", min_length=1)


class TimePayload(BaseModel):
    """Value object describing a single sampled instant.

    Every representation is derived from the same clock read, so the fields
    never disagree with each other across a second or millisecond boundary.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    iso: str = Field(..., description="Local wall-clock time in ISO-8601 with UTC offset")
    utc: str = Field(..., description="RFC-1123 UTC representation")
    epoch_millis: int = Field(..., ge=0, description="Milliseconds since the Unix epoch")
    timezone: str = Field(..., description="IANA timezone name, or UTC when unresolvable")
    utc_offset: str = Field(..., description="Local UTC offset", pattern=UTC_OFFSET_PATTERN)
    server: ServerInfo = Field(..., description="Host identification")

    @field_validator("iso")
    @classmethod
    def validate_iso_has_offset(cls, v: str) -> str:
        """Ensure the ISO string carries an explicit offset instead of a Z suffix."""
        if v.endswith("Z"):
            raise ValueError("ISO representation must end with a +HH:MM/-HH:MM offset")
        return v


class HealthStatus(BaseModel):
    """Domain model representing the liveness of the process."""

    model_config = ConfigDict(strict=True, frozen=True)

    status: Literal["ok"] = Field(default="ok", description="Liveness status")
    uptime: float = Field(..., ge=0, description="Process uptime in seconds")


class ServiceConfiguration(BaseModel):
    """Domain model for service configuration, resolved once at startup."""

    model_config = ConfigDict(strict=True, frozen=True)

    port: int = Field(default=3000, ge=1, le=65535, description="Listening port")
    host: str = Field(default="0.0.0.0", min_length=1, description="Bind address")  # nosec B104
    environment: str = Field(
        default="production", min_length=1, description="Deployment environment label"
    )
    trust_proxy: bool = Field(
        default=False, description="Honor X-Forwarded-* headers from upstream proxies"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    api_doc_path: Path = Field(..., description="Location of the OpenAPI document")

    @field_validator("environment", mode="before")
    @classmethod
    def strip_environment(cls, v: object) -> object:
        """Surrounding whitespace is dropped before the length check."""
        return v.strip() if isinstance(v, str) else v

    @property
    def pretty_json(self) -> bool:
        """Whether JSON responses are indented for human readers."""
        return self.environment.lower() == "development"


class DocumentLoaded(BaseModel):
    """The API document was read and parsed successfully."""

    model_config = ConfigDict(frozen=True)

    document: dict[str, Any] = Field(..., description="Parsed OpenAPI document")
    source: str = Field(..., description="Where the document was loaded from")

    @property
    def title(self) -> str:
        info = self.document.get("info")
        if isinstance(info, dict) and isinstance(info.get("title"), str):
            return info["title"]
        return "API Docs"


class DocumentUnavailable(BaseModel):
    """The API document could not be loaded; documentation routes degrade to 404."""

    model_config = ConfigDict(frozen=True)

    reason: str = Field(..., description="Why the document is unavailable")
    source: str = Field(..., description="Where loading was attempted")


ApiDocument = DocumentLoaded | DocumentUnavailable
