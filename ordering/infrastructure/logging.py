"""
Logging infrastructure.

Provides logging utilities for the infrastructure layer. Level and format
come from ``LOG_*`` environment variables (or .env).
"""
import logging
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="LOG_", extra="ignore")

    level: str = "INFO"
    fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


@lru_cache()
def get_logging_settings() -> LoggingSettings:
    """Return cached logging settings."""
    return LoggingSettings()


def get_logger(name: str, settings: Optional[LoggingSettings] = None) -> logging.Logger:
    """
    Get logger instance.

    Configures a single stream handler the first time a name is requested;
    later calls return the logger unchanged.

    Args:
        name: Logger name (usually module name)
        settings: Logging settings; defaults to the cached global settings

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    settings = settings or get_logging_settings()
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(settings.fmt))
    logger.addHandler(handler)
    logger.setLevel(settings.level.upper())
    return logger
