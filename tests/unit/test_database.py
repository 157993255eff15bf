"""Unit tests for dex_common.database (no real database)."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from config.settings import Settings
from src.dex_common.database import create_engine, create_session_factory, verify_connection
from src.dex_common.errors import ConnectionFailedError


class _FakeConnection:
    def __init__(self, execute: AsyncMock) -> None:
        self.execute = execute

    async def __aenter__(self) -> "_FakeConnection":
        return self

    async def __aexit__(self, *exc: object) -> bool:
        return False


class _RefusingConnection:
    async def __aenter__(self) -> None:
        raise ConnectionRefusedError(111, "Connection refused")

    async def __aexit__(self, *exc: object) -> bool:
        return False


def _engine(connection: object) -> MagicMock:
    engine = MagicMock()
    engine.connect = MagicMock(return_value=connection)
    return engine


def _settings() -> Settings:
    return Settings(
        _env_file=None,
        DATABASE_URL="postgresql+asyncpg://u:p@localhost:5432/dex",
        DB_POOL_SIZE=3,
    )


class TestFactories:
    def test_create_engine_is_lazy(self) -> None:
        engine = create_engine(_settings())
        assert isinstance(engine, AsyncEngine)
        assert engine.url.database == "dex"
        assert engine.pool.size() == 3

    def test_session_factory_binds_engine(self) -> None:
        engine = create_engine(_settings())
        factory = create_session_factory(engine)
        assert factory.class_ is AsyncSession
        assert factory.kw["bind"] is engine
        assert factory.kw["expire_on_commit"] is False


class TestVerifyConnection:
    async def test_success_runs_select_1(self) -> None:
        execute = AsyncMock()
        await verify_connection(_engine(_FakeConnection(execute)))
        execute.assert_awaited_once()
        assert "SELECT 1" in str(execute.await_args.args[0])

    async def test_refused_connection(self) -> None:
        with pytest.raises(ConnectionFailedError) as exc_info:
            await verify_connection(_engine(_RefusingConnection()))
        assert isinstance(exc_info.value.__cause__, ConnectionRefusedError)
        assert exc_info.value.code == 2001

    async def test_operational_error(self) -> None:
        execute = AsyncMock(side_effect=OperationalError("SELECT 1", {}, Exception("down")))
        with pytest.raises(ConnectionFailedError):
            await verify_connection(_engine(_FakeConnection(execute)))
