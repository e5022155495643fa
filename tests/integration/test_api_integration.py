"""Integration tests for the FastAPI application.

These tests verify that all layers work together correctly over HTTP,
using the real system adapters and the packaged API document.
"""

from __future__ import annotations

import json
import os
import re
import time
from pathlib import Path
from unittest.mock import patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from time_api.domain.models import ServiceConfiguration
from time_api.infrastructure.configuration_adapter import DEFAULT_API_DOC_PATH
from time_api.infrastructure.factory import InfrastructureFactory
from time_api.main import create_app

OFFSET_RE = re.compile(r"^[+-]\d{2}:\d{2}$")


def build_app(config: ServiceConfiguration) -> FastAPI:
    return create_app(InfrastructureFactory.create_app_context(config))


@pytest.fixture
def client(service_config: ServiceConfiguration) -> TestClient:
    """Create a test client for the app with documentation available."""
    return TestClient(build_app(service_config))


@pytest.fixture
def degraded_client(tmp_path: Path) -> TestClient:
    """Create a test client for an app whose API document is missing."""
    config = ServiceConfiguration(api_doc_path=tmp_path / "missing.json")
    return TestClient(build_app(config))


class TestAPIIntegration:
    """Integration tests for API endpoints."""

    def test_health_endpoint(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert isinstance(data["uptime"], float)
        assert data["uptime"] >= 0

    def test_time_endpoint(self, client: TestClient) -> None:
        before = time.time_ns() // 1_000_000
        response = client.get("/api/v1/time")
        after = time.time_ns() // 1_000_000

        assert response.status_code == 200
        data = response.json()
        assert set(data) == {"iso", "utc", "epochMillis", "timezone", "utcOffset", "server"}
        assert isinstance(data["epochMillis"], int)
        assert before <= data["epochMillis"] <= after
        assert isinstance(data["timezone"], str) and data["timezone"]
        assert data["utc"].endswith(" GMT")
        assert data["server"]["env"] == "production"
        assert data["server"]["hostname"]

    def test_time_offset_consistent_with_iso(self, client: TestClient) -> None:
        data = client.get("/api/v1/time").json()

        offset = data["utcOffset"]
        assert OFFSET_RE.match(offset)
        assert 0 <= int(offset[-2:]) <= 59
        assert data["iso"].endswith(offset)
        assert not data["iso"].endswith("Z")

    def test_time_fields_share_one_instant(self, client: TestClient) -> None:
        """Test iso and epochMillis describe the same millisecond."""
        from datetime import datetime

        data = client.get("/api/v1/time").json()

        parsed = datetime.fromisoformat(data["iso"])
        assert round(parsed.timestamp() * 1000) == data["epochMillis"]

    def test_epoch_millis_non_decreasing(self, client: TestClient) -> None:
        values = [client.get("/api/v1/time").json()["epochMillis"] for _ in range(5)]

        assert values == sorted(values)

    def test_root_redirects_to_docs(self, client: TestClient) -> None:
        response = client.get("/", follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == "/docs"

    def test_docs_browser(self, client: TestClient) -> None:
        response = client.get("/docs")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "swagger-ui" in response.text
        assert "/api-docs.json" in response.text
        assert "Server Time API Docs" in response.text

    @pytest.mark.parametrize("path", ["/api-docs.json", "/openapi.json"])
    def test_api_document(self, client: TestClient, path: str) -> None:
        response = client.get(path)

        assert response.status_code == 200
        assert response.json() == json.loads(DEFAULT_API_DOC_PATH.read_text(encoding="utf-8"))

    def test_nonexistent_endpoint_returns_404(self, client: TestClient) -> None:
        response = client.get("/nonexistent")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found", "code": "HTTP_404"}

    @pytest.mark.parametrize("endpoint", ["/health", "/api/v1/time", "/api-docs.json"])
    def test_endpoints_accept_get_only(self, client: TestClient, endpoint: str) -> None:
        response = client.post(endpoint)

        assert response.status_code == 405
        assert "GET" in response.headers["allow"]

    def test_no_server_banner(self, client: TestClient) -> None:
        response = client.get("/health")

        assert "x-powered-by" not in response.headers

    def test_lifespan_runs_with_context_manager(self, service_config: ServiceConfiguration) -> None:
        with TestClient(build_app(service_config)) as client:
            assert client.get("/health").status_code == 200


class TestDegradedDocumentation:
    """The service keeps answering when the API document cannot be loaded."""

    @pytest.mark.parametrize("path", ["/api-docs.json", "/openapi.json"])
    def test_api_document_404(self, degraded_client: TestClient, path: str) -> None:
        response = degraded_client.get(path)

        assert response.status_code == 404
        data = response.json()
        assert "error" in data
        assert "not available" in data["error"]

    def test_docs_browser_absent(self, degraded_client: TestClient) -> None:
        assert degraded_client.get("/docs").status_code != 200

    def test_time_and_health_unaffected(self, degraded_client: TestClient) -> None:
        assert degraded_client.get("/health").status_code == 200
        assert degraded_client.get("/health").json()["status"] == "ok"
        assert degraded_client.get("/api/v1/time").status_code == 200

    def test_root_still_redirects(self, degraded_client: TestClient) -> None:
        response = degraded_client.get("/", follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == "/docs"

    def test_unparsable_document(self, tmp_path: Path) -> None:
        path = tmp_path / "openapi.json"
        path.write_text("openapi: 3.0.3\ninfo: {}")
        client = TestClient(build_app(ServiceConfiguration(api_doc_path=path)))

        assert client.get("/api-docs.json").status_code == 404
        assert client.get("/docs").status_code != 200
        assert client.get("/api/v1/time").status_code == 200


class TestEnvironmentDrivenApp:
    """Tests for the app built from environment variables."""

    def test_example_scenario(self) -> None:
        """PORT=4000 with no environment label serves the documented payload."""
        with patch.dict(os.environ, {"PORT": "4000"}, clear=True):
            app = create_app()
        client = TestClient(app)

        before = time.time_ns() // 1_000_000
        response = client.get("/api/v1/time")
        after = time.time_ns() // 1_000_000

        assert app.state.context.config.port == 4000
        assert response.status_code == 200
        data = response.json()
        assert before - 50 <= data["epochMillis"] <= after + 50
        assert isinstance(data["timezone"], str)
        assert OFFSET_RE.match(data["utcOffset"])
        assert data["server"]["env"] == "production"

    def test_development_pretty_prints(self) -> None:
        with patch.dict(os.environ, {"ENVIRONMENT": "development"}, clear=True):
            client = TestClient(create_app())

        response = client.get("/api/v1/time")

        assert response.status_code == 200
        assert '\n  "iso": ' in response.text
        assert response.json()["server"]["env"] == "development"

    @pytest.mark.parametrize("env_vars", [{"ENVIRONMENT": "   "}, {"NODE_ENV": " \t"}])
    def test_blank_environment_label_serves_time(self, env_vars: dict[str, str]) -> None:
        with patch.dict(os.environ, env_vars, clear=True):
            client = TestClient(create_app())

        response = client.get("/api/v1/time")

        assert response.status_code == 200
        assert response.json()["server"]["env"] == "production"

    def test_environment_label_reported_as_given(self) -> None:
        with patch.dict(os.environ, {"ENVIRONMENT": "Development"}, clear=True):
            client = TestClient(create_app())

        response = client.get("/api/v1/time")

        assert response.json()["server"]["env"] == "Development"
        assert '\n  "iso": ' in response.text

    def test_production_compact_json(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            client = TestClient(create_app())

        assert "\n" not in client.get("/health").text
