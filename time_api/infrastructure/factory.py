"""Infrastructure factory for creating adapters and the application context.

This module follows the Factory pattern to centralize the creation of
infrastructure components, promoting loose coupling and testability.
"""

from __future__ import annotations

from ..application.context import AppContext
from ..application.documentation_service import DocumentationService
from ..application.monitoring_service import MonitoringService
from ..application.time_payload_builder import TimePayloadBuilder
from ..domain.models import ApiDocument, ServiceConfiguration
from ..ports.api_document import ApiDocumentPort
from ..ports.clock import ClockPort, TimezonePort
from ..ports.configuration import ConfigurationPort
from ..ports.host import HostPort
from .api_document_loader import OpenApiFileLoader
from .configuration_adapter import EnvironmentConfigurationAdapter
from .system_adapters import LocalTimezoneAdapter, SystemClock, SystemHostAdapter


class InfrastructureFactory:
    """Factory for creating infrastructure adapters following hexagonal architecture.

    Tests swap individual ports by passing them to ``create_app_context``.
    """

    @staticmethod
    def create_configuration_port() -> ConfigurationPort:
        return EnvironmentConfigurationAdapter()

    @staticmethod
    def create_clock_port() -> ClockPort:
        return SystemClock()

    @staticmethod
    def create_timezone_port() -> TimezonePort:
        return LocalTimezoneAdapter()

    @staticmethod
    def create_host_port() -> HostPort:
        return SystemHostAdapter()

    @staticmethod
    def create_api_document_port(config: ServiceConfiguration) -> ApiDocumentPort:
        return OpenApiFileLoader(config.api_doc_path)

    @classmethod
    def create_app_context(
        cls,
        config: ServiceConfiguration,
        *,
        clock: ClockPort | None = None,
        timezone: TimezonePort | None = None,
        host: HostPort | None = None,
        api_document: ApiDocument | None = None,
    ) -> AppContext:
        """Create the process-lifetime application context.

        Args:
            config: Service configuration
            clock: Optional clock port, defaults to the system clock
            timezone: Optional timezone port, defaults to tzlocal resolution
            host: Optional host port, defaults to the running process
            api_document: Optional preloaded document, defaults to loading
                ``config.api_doc_path``

        Returns:
            AppContext: Context shared read-only by all request handlers
        """
        host = host or cls.create_host_port()
        if api_document is None:
            api_document = cls.create_api_document_port(config).load()

        return AppContext(
            config=config,
            api_document=api_document,
            time_payload_builder=TimePayloadBuilder(
                clock=clock or cls.create_clock_port(),
                timezone=timezone or cls.create_timezone_port(),
                host=host,
                environment=config.environment,
            ),
            monitoring_service=MonitoringService(host),
            documentation_service=DocumentationService(api_document),
        )
