"""Centralized error handling for the API layer.

This module provides consistent error handling across all API endpoints,
mapping domain exceptions to appropriate HTTP responses with a flat
``{"error": ...}`` body.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

from ...domain.exceptions import (
    ConfigurationException,
    DocumentationUnavailableException,
    DomainException,
)

if TYPE_CHECKING:
    from fastapi import FastAPI

logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    """Standard error response model."""

    model_config = ConfigDict(strict=True, frozen=True)

    error: str = Field(..., description="Error message")
    code: str = Field(..., description="Error code")


# Mapping of domain exception types to HTTP status codes
EXCEPTION_STATUS_MAP = {
    DocumentationUnavailableException: status.HTTP_404_NOT_FOUND,
    ConfigurationException: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def create_error_response(
    message: str, code: str, status_code: int, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Create a standardized error response.

    Args:
        message: Human-readable error message
        code: Machine-readable error code
        status_code: HTTP status code
        headers: Extra response headers

    Returns:
        JSONResponse with error information
    """
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message, code=code).model_dump(),
        headers=headers,
    )


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """Handle domain-specific exceptions."""
    logger.warning(
        f"Domain exception on {request.method} {request.url.path}: "
        f"{exc.message} (code: {exc.error_code})"
    )
    status_code = EXCEPTION_STATUS_MAP.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    return create_error_response(exc.message, exc.error_code, status_code)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions, including router 404/405, with consistent format."""
    logger.info(
        f"HTTP exception on {request.method} {request.url.path}: {exc.status_code} - {exc.detail}"
    )
    return create_error_response(
        str(exc.detail), f"HTTP_{exc.status_code}", exc.status_code, headers=exc.headers
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}",
        exc_info=exc,
    )
    return create_error_response(
        "An internal server error occurred",
        "INTERNAL_ERROR",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers with the FastAPI app.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
