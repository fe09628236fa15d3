"""Manages the HTTP session shared by all requests of a run."""
import requests
from requests.adapters import HTTPAdapter

from .constants import LoadTestConstants


class RequestSessionManager:
    """Manages HTTP request sessions."""

    @staticmethod
    def create_session(pool_size: int = LoadTestConstants.DEFAULT_CONCURRENT_REQUESTS) -> requests.Session:
        """Create a session that never retries and keeps one pooled connection per worker."""
        session = requests.Session()
        session.headers["User-Agent"] = LoadTestConstants.USER_AGENT
        adapter = HTTPAdapter(pool_connections=pool_size, pool_maxsize=pool_size, max_retries=0)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session
