"""Time helpers shared by the HTTP slices."""

import time
from datetime import datetime, timezone

# Captured at import, which happens once when the service process starts.
PROCESS_STARTED_AT = time.monotonic()


def process_uptime() -> float:
    """Seconds since the service process started."""
    return time.monotonic() - PROCESS_STARTED_AT


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds, e.g. ``2024-01-01T12:00:00.000Z``."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
