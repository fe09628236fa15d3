"""Constants for the stress test."""
from typing import Tuple


class LoadTestConstants:
    """Centralized constants for stress test configuration."""
    DEFAULT_BASE_URL = "http://localhost:3000"
    DEFAULT_ENDPOINT = "/pi"
    DEFAULT_CONCURRENT_REQUESTS = 10
    DEFAULT_TOTAL_REQUESTS = 100
    DEFAULT_DELAY_BETWEEN_BATCHES = 1000  # milliseconds
    DEFAULT_TIMEOUT = 5000  # milliseconds
    USER_AGENT = "Stress-Test-Script/1.0"
    PERCENTILES: Tuple[int, ...] = (50, 90, 95, 99)
    REPORT_WIDTH = 60
    LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
    ERRORS_FILE_SUFFIX = "_errors"
