"""Application performance monitoring for the Monitoring API."""

import time
from typing import Awaitable, Callable, Optional

from fastapi import Request, Response
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, Counter, Gauge, Histogram, generate_latest

from monitoring_api.const import (
    HTTP_ERROR, METRIC_REQUEST_DURATION, METRIC_REQUESTS_IN_PROGRESS, METRIC_REQUESTS_TOTAL,
    UNMATCHED_ROUTE_LABEL
)


class MetricsManager:
    """Owns the Prometheus collectors for one application instance.

    Each manager registers its collectors in its own registry so several apps
    can live in one process (tests build a fresh app per case).
    """

    def __init__(self, app_name: str, registry: Optional[CollectorRegistry] = None):
        self.app_name = app_name
        self.registry = registry if registry is not None else CollectorRegistry()

        self.request_count = Counter(
            METRIC_REQUESTS_TOTAL,
            "Total HTTP requests handled",
            ["app", "method", "endpoint", "http_status"],
            registry=self.registry,
        )
        self.request_latency = Histogram(
            METRIC_REQUEST_DURATION,
            "HTTP request latency in seconds",
            ["app", "method", "endpoint"],
            registry=self.registry,
        )
        self.in_progress = Gauge(
            METRIC_REQUESTS_IN_PROGRESS,
            "Number of in-progress HTTP requests",
            ["app"],
            registry=self.registry,
        )

    @staticmethod
    def endpoint_label(request: Request) -> str:
        """Route template of the matched route, so path parameters do not explode label cardinality."""
        route = request.scope.get("route")
        return getattr(route, "path", UNMATCHED_ROUTE_LABEL)

    def observe(self, method: str, endpoint: str, status_code: int, duration: float) -> None:
        """Record one finished request."""
        self.request_count.labels(self.app_name, method, endpoint, str(status_code)).inc()
        self.request_latency.labels(self.app_name, method, endpoint).observe(duration)

    async def middleware(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        """HTTP middleware timing every request."""
        gauge = self.in_progress.labels(self.app_name)
        gauge.inc()
        start_time = time.perf_counter()
        status_code = HTTP_ERROR
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            duration = time.perf_counter() - start_time
            gauge.dec()
            self.observe(request.method, self.endpoint_label(request), status_code, duration)

    def render(self) -> Response:
        """Prometheus exposition of this manager's registry."""
        return Response(content=generate_latest(self.registry), media_type=CONTENT_TYPE_LATEST)
