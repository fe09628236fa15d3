from typing import Any, Dict

from fastapi import APIRouter

from monitoring_api.const import APP_VERSION, HEALTH_PATH, PI_PATH, ROOT_MESSAGE, ROOT_PATH


class RootRouter:
    """Router describing the service and its endpoints."""

    def __init__(self):
        self.router = APIRouter(tags=["root"])
        self.router.get(ROOT_PATH, response_model=Dict[str, Any])(self.root)

    @classmethod
    def get_router(cls) -> APIRouter:
        """Get the router instance."""
        return cls().router

    async def root(self) -> Dict[str, Any]:
        return {
            "message": ROOT_MESSAGE,
            "version": APP_VERSION,
            "endpoints": {
                "health": HEALTH_PATH,
                "pi": PI_PATH
            }
        }
