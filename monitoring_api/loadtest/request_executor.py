"""Handles individual request execution and timing."""
import logging
import time

import requests

from .models import LoadTestConfig, RequestOutcome


# Configure logging
logger = logging.getLogger(__name__)


class RequestExecutor:
    """Handles individual request execution and timing."""

    def __init__(self, config: LoadTestConfig):
        self.config = config

    def send_request(self, session: requests.Session, request_id: int) -> RequestOutcome:
        """
        Send one GET to the configured endpoint and measure latency.

        Any exception raised while sending (timeout, connection error, non-2xx
        status, unparseable URL) produces a failed outcome; there is no retry.

        Args:
            session: Shared requests session.
            request_id: Identifier used for log correlation.

        Returns:
            RequestOutcome with the elapsed time in milliseconds.
        """
        start_time = time.perf_counter()
        try:
            response = session.get(self.config.target_url, timeout=self.config.timeout_seconds)
            response.raise_for_status()
        except Exception as e:
            return self._failure(request_id, start_time, e)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        if self.config.verbose:
            logger.info(f"Request {request_id}: SUCCESS - {elapsed_ms:.2f}ms - Status: {response.status_code}")
        return RequestOutcome(request_id=request_id, success=True, elapsed_ms=elapsed_ms, status_code=response.status_code)

    @staticmethod
    def describe_error(error: Exception) -> str:
        """Error text prefixed with the exception class, e.g. ``ReadTimeout: ...``."""
        return f"{type(error).__name__}: {error}"

    def _failure(self, request_id: int, start_time: float, error: Exception) -> RequestOutcome:
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        description = self.describe_error(error)
        if self.config.verbose:
            logger.error(f"Request {request_id}: FAILED - {elapsed_ms:.2f}ms - {description}")
        return RequestOutcome(request_id=request_id, success=False, elapsed_ms=elapsed_ms, error=description)
