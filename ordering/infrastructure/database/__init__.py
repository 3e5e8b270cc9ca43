"""Database engine, session factory and lifecycle helpers."""

from .config import (
    DatabaseSettings,
    close_database,
    create_engine,
    get_engine,
    get_session,
    get_session_factory,
    get_settings,
    init_database,
)

__all__ = [
    "DatabaseSettings",
    "close_database",
    "create_engine",
    "get_engine",
    "get_session",
    "get_session_factory",
    "get_settings",
    "init_database",
]
