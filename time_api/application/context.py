"""Process-lifetime application context.

Built once at startup and handed to the web layer; nothing in it is
mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.models import ApiDocument, ServiceConfiguration
from .documentation_service import DocumentationService
from .monitoring_service import MonitoringService
from .time_payload_builder import TimePayloadBuilder


@dataclass(frozen=True)
class AppContext:
    """Configuration, loaded API document and application services."""

    config: ServiceConfiguration
    api_document: ApiDocument
    time_payload_builder: TimePayloadBuilder
    monitoring_service: MonitoringService
    documentation_service: DocumentationService
