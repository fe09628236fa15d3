"""Data models for the stress test."""
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import LoadTestConstants


class LoadTestConfig(BaseSettings):
    """Configuration for one stress test run.

    Resolution order, lowest to highest: defaults, ``.env`` file, environment
    variables (``CONCURRENT_REQUESTS``, ``TOTAL_REQUESTS``, ...), keyword
    arguments (the command-line flags). Frozen once built.
    """

    base_url: str = LoadTestConstants.DEFAULT_BASE_URL
    endpoint: str = LoadTestConstants.DEFAULT_ENDPOINT
    concurrent_requests: int = Field(default=LoadTestConstants.DEFAULT_CONCURRENT_REQUESTS, gt=0)
    total_requests: int = Field(default=LoadTestConstants.DEFAULT_TOTAL_REQUESTS, ge=0)
    delay_between_batches: int = Field(default=LoadTestConstants.DEFAULT_DELAY_BETWEEN_BATCHES, ge=0)
    timeout: int = Field(default=LoadTestConstants.DEFAULT_TIMEOUT, gt=0)
    verbose: bool = False
    output: Optional[Path] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    @property
    def target_url(self) -> str:
        return self.base_url.rstrip("/") + "/" + self.endpoint.lstrip("/")

    @property
    def timeout_seconds(self) -> float:
        return self.timeout / 1000


@dataclass
class RequestOutcome:
    """Result of one HTTP call."""
    request_id: int
    success: bool
    elapsed_ms: float
    status_code: Optional[int] = None
    error: Optional[str] = None


@dataclass
class RequestErrorRecord:
    """A failed request as kept for the error summary."""
    request_id: int
    error: str
    elapsed_ms: float


@dataclass
class LatencyResults:
    """Container for latency percentiles."""
    p50: float
    p90: float
    p95: float
    p99: float
