"""Unit tests for the APM metrics manager."""

from unittest.mock import MagicMock

import pytest
from prometheus_client import CollectorRegistry

from monitoring_api.shared.metrics import MetricsManager
from tests.test_const import TEST_APP_NAME


class TestMetricsManager:
    """Test Prometheus collectors and middleware."""

    @pytest.fixture
    def manager(self):
        return MetricsManager(TEST_APP_NAME, registry=CollectorRegistry())

    def _sample(self, manager, name, labels):
        return manager.registry.get_sample_value(name, labels)

    def test_observe_counts_and_times(self, manager):
        manager.observe("GET", "/pi", 200, 0.01)
        manager.observe("GET", "/pi", 200, 0.02)

        labels = {"app": TEST_APP_NAME, "method": "GET", "endpoint": "/pi", "http_status": "200"}
        assert self._sample(manager, "http_requests_total", labels) == 2.0
        assert self._sample(
            manager, "http_request_duration_seconds_count",
            {"app": TEST_APP_NAME, "method": "GET", "endpoint": "/pi"}
        ) == 2.0

    def test_separate_registries(self):
        first = MetricsManager(TEST_APP_NAME)
        second = MetricsManager(TEST_APP_NAME)
        assert first.registry is not second.registry

    def test_endpoint_label_unmatched(self):
        request = MagicMock()
        request.scope = {}
        assert MetricsManager.endpoint_label(request) == "unmatched"

    @pytest.mark.asyncio
    async def test_middleware_records_failure_as_500(self, manager):
        request = MagicMock()
        request.method = "GET"
        request.scope = {}

        async def call_next(_):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            await manager.middleware(request, call_next)

        labels = {"app": TEST_APP_NAME, "method": "GET", "endpoint": "unmatched", "http_status": "500"}
        assert self._sample(manager, "http_requests_total", labels) == 1.0
        assert self._sample(manager, "http_requests_in_progress", {"app": TEST_APP_NAME}) == 0.0

    def test_render(self, manager):
        manager.observe("GET", "/health", 200, 0.001)
        response = manager.render()
        assert b"http_requests_total" in response.body
