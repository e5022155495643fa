"""API document port interface."""

from __future__ import annotations

from typing import Protocol

from ..domain.models import ApiDocument


class ApiDocumentPort(Protocol):
    """Protocol interface for loading the published API document."""

    def load(self) -> ApiDocument:
        """Load the API document.

        Loading is best-effort and must never raise: failures are reported
        as ``DocumentUnavailable``.

        Returns:
            ApiDocument: ``DocumentLoaded`` or ``DocumentUnavailable``
        """
        ...
