"""Constants for the Monitoring API."""

# Default configuration values
DEFAULT_SERVER_HOST = "0.0.0.0"
DEFAULT_SERVER_PORT = 3000
DEFAULT_ENVIRONMENT = "development"
DEFAULT_APP_NAME = "monitoring-app"

# Logging configuration
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Library log levels
LIBRARY_LOG_LEVELS = {
    "uvicorn": "WARNING",
    "uvicorn.access": "WARNING",
    "fastapi": "WARNING",
    "urllib3": "WARNING"
}

# HTTP status codes
HTTP_NOT_FOUND = 404
HTTP_METHOD_NOT_ALLOWED = 405
HTTP_ERROR = 500

# FastAPI app constants
APP_TITLE = "Monitoring API"
APP_DESCRIPTION = "Health check and PI endpoints instrumented for performance monitoring"
APP_VERSION = "1.0.0"
ROOT_MESSAGE = "Monitoring API with APM Integration"

# Endpoint paths
ROOT_PATH = "/"
HEALTH_PATH = "/health"
PI_PATH = "/pi"
METRICS_PATH = "/metrics"
AVAILABLE_ENDPOINTS = [HEALTH_PATH, PI_PATH, ROOT_PATH]

# Health check constants
HEALTH_STATUS_OK = "OK"

# PI endpoint constants
PI_DIGITS = 10
PI_DECIMAL_PLACES = PI_DIGITS - 1

# Error responses
NOT_FOUND_ERROR = "Endpoint not found"
INTERNAL_ERROR = "Something went wrong!"

# Metric names
METRIC_REQUESTS_TOTAL = "http_requests_total"
METRIC_REQUEST_DURATION = "http_request_duration_seconds"
METRIC_REQUESTS_IN_PROGRESS = "http_requests_in_progress"
UNMATCHED_ROUTE_LABEL = "unmatched"
