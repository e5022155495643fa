"""Application service exposing the published API document."""

from __future__ import annotations

from typing import Any

from ..domain.exceptions import DocumentationUnavailableException
from ..domain.models import ApiDocument, DocumentLoaded


class DocumentationService:
    """Read-only access to the API document loaded at startup."""

    def __init__(self, api_document: ApiDocument):
        """Initialize the documentation service.

        Args:
            api_document: Result of the startup load
        """
        self._api_document = api_document

    @property
    def is_available(self) -> bool:
        return isinstance(self._api_document, DocumentLoaded)

    @property
    def title(self) -> str:
        if isinstance(self._api_document, DocumentLoaded):
            return self._api_document.title
        return "API Docs"

    def get_document(self) -> dict[str, Any]:
        """Get the raw API document.

        Returns:
            dict: Parsed OpenAPI document

        Raises:
            DocumentationUnavailableException: If the document failed to load
        """
        if isinstance(self._api_document, DocumentLoaded):
            return self._api_document.document
        raise DocumentationUnavailableException(
            f"API documentation is not available: {self._api_document.reason}"
        )
