"""Main entry point for the Server Time API.

This module sets up the FastAPI application using hexagonal architecture,
with clear separation between framework concerns and business logic, and
runs it under uvicorn.
"""

from __future__ import annotations

import logging
import signal
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from . import __version__
from .application.context import AppContext
from .domain.exceptions import ConfigurationException
from .domain.models import DocumentUnavailable, ServiceConfiguration
from .infrastructure.api.docs_routes import create_docs_ui_router
from .infrastructure.api.docs_routes import router as docs_router
from .infrastructure.api.error_handlers import register_error_handlers
from .infrastructure.api.responses import response_class_for
from .infrastructure.api.routes import router
from .infrastructure.factory import InfrastructureFactory

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan manager.

    Emits the startup notice once the listener is ready and the shutdown
    notice after in-flight requests have drained.
    """
    context: AppContext = app.state.context
    config = context.config

    logger.info(f"Service configured for environment: {config.environment}")
    if isinstance(context.api_document, DocumentUnavailable):
        logger.warning(f"Serving without API documentation: {context.api_document.reason}")
    logger.info(f"Server Time API listening on http://localhost:{config.port}")

    try:
        yield
    finally:
        logger.info("Shutting down Server Time API")


def create_app(context: AppContext | None = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        context: Application context; built from environment configuration
            when omitted, which makes this usable as a ``uvicorn --factory`` target

    Returns:
        FastAPI: Configured application

    Raises:
        ConfigurationException: If the environment configuration is invalid
    """
    if context is None:
        config = InfrastructureFactory.create_configuration_port().load_configuration()
        context = InfrastructureFactory.create_app_context(config)

    # The published document is the static one; disable the generated docs.
    app = FastAPI(
        title="Server Time API",
        description="Reports the server's current time",
        version=__version__,
        lifespan=lifespan,
        openapi_url=None,
        docs_url=None,
        redoc_url=None,
        default_response_class=response_class_for(context.config.pretty_json),
    )
    app.state.context = context

    register_error_handlers(app)

    app.include_router(router)
    app.include_router(docs_router)
    if context.documentation_service.is_available:
        app.include_router(create_docs_ui_router(context.documentation_service))

    return app


def build_server_config(app: FastAPI, config: ServiceConfiguration) -> uvicorn.Config:
    """Translate service configuration into uvicorn settings.

    Forwarded headers are only honored when ``trust_proxy`` is enabled.
    """
    return uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        log_config=None,
        proxy_headers=config.trust_proxy,
        forwarded_allow_ips="*" if config.trust_proxy else None,
        server_header=False,
    )


def main() -> int:
    """Run the service until SIGINT/SIGTERM.

    Returns:
        int: Process exit code, 0 after a graceful shutdown
    """
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    try:
        config = InfrastructureFactory.create_configuration_port().load_configuration()
    except ConfigurationException as e:
        logger.error(e.message)
        return 1

    logging.getLogger().setLevel(config.log_level)

    app = create_app(InfrastructureFactory.create_app_context(config))
    server = uvicorn.Server(build_server_config(app, config))

    def signal_handler(sig, frame):
        """Request a graceful shutdown."""
        logger.info(f"Received signal {sig}, initiating graceful shutdown...")
        server.should_exit = True

    # uvicorn swaps in its own handlers while serving and re-delivers the
    # captured signal to these once in-flight requests have drained.
    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    server.run()

    if not server.started:
        logger.error("Server Time API failed to start")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
