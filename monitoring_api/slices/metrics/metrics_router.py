from fastapi import APIRouter, Response

from monitoring_api.const import METRICS_PATH
from monitoring_api.shared.metrics import MetricsManager


class MetricsRouter:
    """Router exposing the Prometheus metrics of the service."""

    def __init__(self, metrics_manager: MetricsManager):
        self.metrics_manager = metrics_manager
        self.router = APIRouter(tags=["metrics"])
        self.router.get(METRICS_PATH, include_in_schema=False)(self.metrics)

    @classmethod
    def get_router(cls, metrics_manager: MetricsManager) -> APIRouter:
        """Get the router instance."""
        return cls(metrics_manager).router

    async def metrics(self) -> Response:
        """Prometheus text exposition."""
        return self.metrics_manager.render()
