from fastapi import APIRouter
from typing import Dict, Any

from monitoring_api.const import HEALTH_PATH, HEALTH_STATUS_OK
from monitoring_api.shared.clock import process_uptime, utc_timestamp
from monitoring_api.shared.logging import LoggingManager


class HealthRouter:
    """Router for health endpoints."""

    def __init__(self, environment: str):
        self.environment = environment
        self.router = APIRouter(prefix=HEALTH_PATH, tags=["health"])
        self.logger = LoggingManager.get_logger(__name__)
        self.router.get("", response_model=Dict[str, Any])(self.health_check)

    @classmethod
    def get_router(cls, environment: str) -> APIRouter:
        """Get the router instance."""
        return cls(environment).router

    async def health_check(self) -> Dict[str, Any]:
        """Report liveness, uptime and the deployment environment."""
        uptime = process_uptime()
        self.logger.debug(f"Health check: uptime {uptime:.3f}s")
        return {
            "status": HEALTH_STATUS_OK,
            "timestamp": utc_timestamp(),
            "uptime": uptime,
            "environment": self.environment
        }
