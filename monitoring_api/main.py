"""Main entry point for the Monitoring API."""

from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from monitoring_api.const import (
    APP_DESCRIPTION, APP_TITLE, APP_VERSION, AVAILABLE_ENDPOINTS, HEALTH_PATH, HTTP_ERROR,
    HTTP_METHOD_NOT_ALLOWED, HTTP_NOT_FOUND, INTERNAL_ERROR, NOT_FOUND_ERROR, PI_PATH
)
from monitoring_api.shared.config import Config
from monitoring_api.shared.logging import LoggingManager
from monitoring_api.shared.metrics import MetricsManager
from monitoring_api.slices.health.health_router import HealthRouter
from monitoring_api.slices.metrics.metrics_router import MetricsRouter
from monitoring_api.slices.pi.pi_router import PiRouter
from monitoring_api.slices.root.root_router import RootRouter


class MonitoringApiApp:
    """Main application class for the Monitoring API."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config if config is not None else Config()

        # Setup logging
        LoggingManager.setup_logging(self.config.log_level, library_log_levels=self.config.library_log_levels)
        self.logger = LoggingManager.get_logger(__name__)

        # Create FastAPI app
        self.app = FastAPI(
            title=APP_TITLE,
            description=APP_DESCRIPTION,
            version=APP_VERSION,
        )

        # Mount slices
        self.app.include_router(RootRouter.get_router())
        self.app.include_router(HealthRouter.get_router(self.config.environment))
        self.app.include_router(PiRouter.get_router())

        self.metrics_manager = None
        if self.config.metrics_enabled:
            self.metrics_manager = MetricsManager(self.config.app_name)
            self.app.include_router(MetricsRouter.get_router(self.metrics_manager))
            self.app.middleware("http")(self.metrics_manager.middleware)

        # Error handlers
        self.app.add_exception_handler(StarletteHTTPException, self.http_exception_handler)
        self.app.add_exception_handler(Exception, self.unhandled_exception_handler)

    async def http_exception_handler(self, request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Answer unknown routes, and known paths hit with another method, with the endpoint list."""
        if exc.status_code in (HTTP_NOT_FOUND, HTTP_METHOD_NOT_ALLOWED):
            return JSONResponse(
                status_code=HTTP_NOT_FOUND,
                content={"error": NOT_FOUND_ERROR, "availableEndpoints": AVAILABLE_ENDPOINTS},
            )
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=exc.headers)

    async def unhandled_exception_handler(self, request: Request, exc: Exception) -> JSONResponse:
        self.logger.error(f"Error handling {request.method} {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(status_code=HTTP_ERROR, content={"error": INTERNAL_ERROR, "message": str(exc)})


class MonitoringServer(uvicorn.Server):
    """uvicorn server that announces the endpoints once its sockets are bound."""

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        if not self.started:
            return
        port = self.config.port
        logger = LoggingManager.get_logger(__name__)
        logger.info(f"Server is running on port {port}")
        logger.info(f"Health check available at: http://localhost:{port}{HEALTH_PATH}")
        logger.info(f"PI endpoint available at: http://localhost:{port}{PI_PATH}")


def run() -> None:
    """Serve the application with uvicorn."""
    server_config = Config()
    MonitoringServer(uvicorn.Config(app, host=server_config.host, port=server_config.port)).run()


# Create application instance
app_instance = MonitoringApiApp()
app = app_instance.app


if __name__ == "__main__":
    run()
