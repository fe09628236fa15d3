from typing import Dict

from pydantic_settings import BaseSettings, SettingsConfigDict

from monitoring_api.const import (
    DEFAULT_APP_NAME, DEFAULT_ENVIRONMENT, DEFAULT_LOG_LEVEL, DEFAULT_SERVER_HOST,
    DEFAULT_SERVER_PORT, LIBRARY_LOG_LEVELS
)


class Config(BaseSettings):
    """Global configuration settings for the Monitoring API.

    Values are read from the environment (``PORT``, ``ENVIRONMENT``, ...) and
    from a ``.env`` file in the working directory; explicit keyword arguments
    win over both.
    """

    host: str = DEFAULT_SERVER_HOST
    port: int = DEFAULT_SERVER_PORT
    environment: str = DEFAULT_ENVIRONMENT
    app_name: str = DEFAULT_APP_NAME
    metrics_enabled: bool = True
    log_level: str = DEFAULT_LOG_LEVEL
    library_log_levels: Dict[str, str] = dict(LIBRARY_LOG_LEVELS)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
