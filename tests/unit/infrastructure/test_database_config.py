"""Tests for database settings and engine wiring."""

import pytest
from sqlalchemy import inspect

from ordering.infrastructure.database import config
from ordering.infrastructure.database import (
    DatabaseSettings,
    close_database,
    create_engine,
    get_session,
    get_session_factory,
    init_database,
)


def test_defaults_target_postgres(monkeypatch):
    monkeypatch.delenv("DB_DATABASE_URL", raising=False)
    settings = DatabaseSettings(_env_file=None)

    assert settings.database_url.startswith("postgresql+asyncpg://")
    assert settings.is_sqlite is False
    assert settings.pool_size == 10
    assert settings.echo_sql is False


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("DB_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    monkeypatch.setenv("DB_POOL_SIZE", "3")
    monkeypatch.setenv("DB_ECHO_SQL", "true")

    settings = DatabaseSettings(_env_file=None)

    assert settings.database_url == "sqlite+aiosqlite:///:memory:"
    assert settings.is_sqlite is True
    assert settings.pool_size == 3
    assert settings.echo_sql is True


@pytest.mark.asyncio
async def test_sqlite_engine_skips_pool_options():
    engine = create_engine(DatabaseSettings(_env_file=None, database_url="sqlite+aiosqlite:///:memory:"))
    try:
        assert engine.dialect.name == "sqlite"
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_global_engine_lifecycle(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "engine", None)
    monkeypatch.setattr(
        config,
        "get_settings",
        lambda: DatabaseSettings(_env_file=None, database_url=f"sqlite+aiosqlite:///{tmp_path / 'ordering.db'}"),
    )

    engine = config.get_engine()
    assert config.get_engine() is engine

    await init_database()
    async with engine.connect() as conn:
        tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
    assert {"orders", "order_items", "customers", "products"} <= set(tables)

    factory = get_session_factory()
    assert factory.kw["bind"] is engine

    sessions = get_session()
    session = await sessions.__anext__()
    assert session.bind is engine
    await sessions.aclose()

    await close_database()
    assert config.engine is None
