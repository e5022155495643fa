"""Shared pytest fixtures for Server Time API tests."""

import sys
from datetime import timedelta, timezone
from pathlib import Path

import pytest

# Make tests/mocks.py importable from every test directory
sys.path.insert(0, str(Path(__file__).parent))

from mocks import FIXED_INSTANT, FixedClock, FixedHost, FixedTimezone  # noqa: E402
from time_api.domain.models import DocumentLoaded, ServiceConfiguration  # noqa: E402
from time_api.infrastructure.configuration_adapter import DEFAULT_API_DOC_PATH  # noqa: E402


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock frozen at FIXED_INSTANT."""
    return FixedClock(FIXED_INSTANT)


@pytest.fixture
def berlin_summer() -> FixedTimezone:
    """Fixed +02:00 zone named Europe/Berlin."""
    return FixedTimezone(timezone(timedelta(hours=2)), "Europe/Berlin")


@pytest.fixture
def fixed_host() -> FixedHost:
    return FixedHost()


@pytest.fixture
def service_config() -> ServiceConfiguration:
    """Default configuration pointing at the packaged API document."""
    return ServiceConfiguration(api_doc_path=DEFAULT_API_DOC_PATH)


@pytest.fixture
def loaded_document() -> DocumentLoaded:
    return DocumentLoaded(
        document={"openapi": "3.0.3", "info": {"title": "Server Time API", "version": "1.0.0"}},
        source="memory",
    )
