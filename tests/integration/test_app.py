"""Integration tests for the Monitoring API application."""

import pytest
from fastapi.testclient import TestClient

from monitoring_api.main import MonitoringApiApp
from monitoring_api.shared.config import Config
from tests.test_const import (
    AVAILABLE_ENDPOINTS, INTERNAL_ERROR, NOT_FOUND_ERROR, PI_DIGITS, PI_STRING, TEST_APP_NAME,
    TEST_ENVIRONMENT
)


class TestMonitoringApi:
    """Integration tests for the HTTP endpoints."""

    @pytest.fixture
    def app_instance(self):
        """Fresh application with its own metrics registry."""
        return MonitoringApiApp(Config(environment=TEST_ENVIRONMENT, app_name=TEST_APP_NAME))

    @pytest.fixture
    def client(self, app_instance):
        """Test client for the FastAPI app."""
        return TestClient(app_instance.app, raise_server_exceptions=False)

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        body = response.json()
        assert body["version"] == "1.0.0"
        assert body["endpoints"] == {"health": "/health", "pi": "/pi"}

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "OK"
        assert body["environment"] == TEST_ENVIRONMENT
        assert set(body) == {"status", "timestamp", "uptime", "environment"}

    def test_health_uptime_non_decreasing(self, client):
        first = client.get("/health").json()["uptime"]
        second = client.get("/health").json()["uptime"]
        assert second >= first

    def test_pi(self, client):
        response = client.get("/pi")

        assert response.status_code == 200
        body = response.json()
        assert body["pi"] == PI_STRING
        assert body["digits"] == PI_DIGITS
        assert "timestamp" in body

    def test_unknown_path_returns_404(self, client):
        response = client.get("/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {"error": NOT_FOUND_ERROR, "availableEndpoints": AVAILABLE_ENDPOINTS}

    def test_wrong_method_returns_404(self, client):
        response = client.post("/pi")

        assert response.status_code == 404
        assert response.json()["availableEndpoints"] == AVAILABLE_ENDPOINTS

    def test_handler_error_returns_500(self, app_instance, client):
        async def broken():
            raise RuntimeError("boom")

        app_instance.app.add_api_route("/broken", broken, methods=["GET"])
        response = client.get("/broken")

        assert response.status_code == 500
        assert response.json() == {"error": INTERNAL_ERROR, "message": "boom"}

    def test_metrics_records_requests(self, client):
        client.get("/pi")
        client.get("/missing")
        response = client.get("/metrics")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        body = response.text
        assert "http_requests_total" in body
        assert f'app="{TEST_APP_NAME}"' in body
        assert 'http_status="200"' in body
        assert 'http_status="404"' in body
        assert "http_request_duration_seconds_bucket" in body

    def test_metrics_disabled(self):
        app_instance = MonitoringApiApp(Config(metrics_enabled=False))
        client = TestClient(app_instance.app)

        assert app_instance.metrics_manager is None
        assert client.get("/metrics").status_code == 404
        assert client.get("/pi").status_code == 200
