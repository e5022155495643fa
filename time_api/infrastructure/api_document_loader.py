"""API document adapter implementation.

Loads the OpenAPI document from a JSON file once at startup. Loading is
best-effort: every failure becomes a ``DocumentUnavailable`` result.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from ..domain.models import ApiDocument, DocumentLoaded, DocumentUnavailable
from ..ports.api_document import ApiDocumentPort

logger = logging.getLogger(__name__)


class OpenApiFileLoader(ApiDocumentPort):
    """Adapter that reads the API document from the filesystem."""

    def __init__(self, path: Path):
        """Initialize the loader.

        Args:
            path: Location of the JSON document
        """
        self._path = path

    def load(self) -> ApiDocument:
        source = str(self._path)
        try:
            with self._path.open(encoding="utf-8") as f:
                document = json.load(f)
        except FileNotFoundError:
            return self._unavailable(source, "document not found")
        except OSError as e:
            return self._unavailable(source, f"document could not be read: {e.strerror or e}")
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return self._unavailable(source, f"document is not valid JSON: {e}")

        if not isinstance(document, dict):
            return self._unavailable(source, "document root must be a JSON object")

        logger.info(f"Loaded API document from {source}")
        return DocumentLoaded(document=document, source=source)

    @staticmethod
    def _unavailable(source: str, reason: str) -> DocumentUnavailable:
        logger.warning(f"API documentation disabled, {reason} ({source})")
        return DocumentUnavailable(reason=reason, source=source)
