"""Shared test configuration and fixtures for all tests."""

import pytest
from unittest.mock import MagicMock

from monitoring_api.loadtest.models import LoadTestConfig, RequestOutcome
from .test_const import CONFIG_ENV_VARS, TEST_BASE_URL, TEST_ENDPOINT


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate configuration from the host environment and any .env file."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def load_test_config():
    """Small, fast configuration for runner tests."""
    return LoadTestConfig(
        base_url=TEST_BASE_URL,
        endpoint=TEST_ENDPOINT,
        concurrent_requests=5,
        total_requests=12,
        delay_between_batches=0,
        timeout=1000,
    )


@pytest.fixture
def mock_response():
    """Mock requests response with a 200 status."""
    response = MagicMock()
    response.status_code = 200
    response.raise_for_status.return_value = None
    return response


@pytest.fixture
def mock_session(mock_response):
    """Mock requests session answering every GET with mock_response."""
    session = MagicMock()
    session.get.return_value = mock_response
    return session


def make_outcome(request_id, elapsed_ms, success=True, error=None):
    """Build a RequestOutcome for aggregation tests."""
    return RequestOutcome(
        request_id=request_id,
        success=success,
        elapsed_ms=elapsed_ms,
        status_code=200 if success else None,
        error=error,
    )
