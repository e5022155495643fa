"""FastAPI dependency injection setup.

Handlers receive the application services from the ``AppContext`` stored on
the application at construction time, never from module-level singletons.
"""

from __future__ import annotations

from fastapi import Request

from ...application.context import AppContext
from ...application.documentation_service import DocumentationService
from ...application.monitoring_service import MonitoringService
from ...application.time_payload_builder import TimePayloadBuilder


def get_app_context(request: Request) -> AppContext:
    """Get the application context attached to the running app.

    Returns:
        AppContext: Process-lifetime context
    """
    return request.app.state.context


def get_time_payload_builder(request: Request) -> TimePayloadBuilder:
    return get_app_context(request).time_payload_builder


def get_monitoring_service(request: Request) -> MonitoringService:
    return get_app_context(request).monitoring_service


def get_documentation_service(request: Request) -> DocumentationService:
    return get_app_context(request).documentation_service
