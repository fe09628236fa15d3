import math
from typing import Any, Dict

from fastapi import APIRouter

from monitoring_api.const import PI_DECIMAL_PLACES, PI_DIGITS, PI_PATH
from monitoring_api.shared.clock import utc_timestamp


class PiRouter:
    """Router for the PI endpoint."""

    def __init__(self):
        self.router = APIRouter(tags=["pi"])
        self.router.get(PI_PATH, response_model=Dict[str, Any])(self.pi)

    @classmethod
    def get_router(cls) -> APIRouter:
        """Get the router instance."""
        return cls().router

    @staticmethod
    def pi_digits() -> str:
        """First ten significant digits of PI, rounded: ``3.141592654``."""
        return f"{math.pi:.{PI_DECIMAL_PLACES}f}"

    async def pi(self) -> Dict[str, Any]:
        """Return PI to ten digits."""
        return {
            "pi": self.pi_digits(),
            "digits": PI_DIGITS,
            "timestamp": utc_timestamp()
        }
