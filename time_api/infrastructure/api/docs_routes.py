"""Documentation routes.

Serves the static OpenAPI document loaded at startup and the Swagger UI
browser rendered from it. The browser route only exists when the document
loaded successfully.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse

from ...application.documentation_service import DocumentationService
from .dependencies import get_documentation_service

API_DOCUMENT_PATH = "/api-docs.json"
OPENAPI_ALIAS_PATH = "/openapi.json"

router = APIRouter()


@router.get(API_DOCUMENT_PATH, include_in_schema=False)
@router.get(OPENAPI_ALIAS_PATH, include_in_schema=False)
async def api_document(
    documentation_service: DocumentationService = Depends(get_documentation_service),  # noqa: B008
) -> dict[str, Any]:
    """Raw OpenAPI document, or 404 when it failed to load."""
    return documentation_service.get_document()


def create_docs_ui_router(documentation_service: DocumentationService) -> APIRouter:
    """Create the router serving the Swagger UI browser.

    Args:
        documentation_service: Service holding the loaded document

    Returns:
        APIRouter: Router with the ``/docs`` route
    """
    ui_router = APIRouter()
    title = f"{documentation_service.title} Docs"

    @ui_router.get("/docs", include_in_schema=False)
    async def swagger_ui() -> HTMLResponse:
        return get_swagger_ui_html(openapi_url=API_DOCUMENT_PATH, title=title)

    return ui_router
