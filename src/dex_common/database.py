"""Engine and session factories.

Nothing here is module-level state: callers build an engine from Settings
at startup and pass sessions explicitly into the services.
"""

import logging

from sqlalchemy import text
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from config.settings import Settings
from src.dex_common.db_errors import CONNECTION_ERRORS
from src.dex_common.errors import ConnectionFailedError

logger = logging.getLogger(__name__)


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine. No connection is opened until first use."""
    return create_async_engine(
        settings.DATABASE_URL,
        echo=settings.DEBUG,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_pre_ping=True,
        connect_args={
            "timeout": settings.DB_CONNECT_TIMEOUT,
            "command_timeout": settings.DB_COMMAND_TIMEOUT,
        },
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def verify_connection(engine: AsyncEngine) -> None:
    """Startup probe: round-trip a trivial query or raise ConnectionFailedError."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (DBAPIError, *CONNECTION_ERRORS) as exc:
        # Do not log the URL (it may contain secrets).
        logger.error("Database connection check failed: %s", type(exc).__name__)
        raise ConnectionFailedError(
            f"Could not connect to database: {type(exc).__name__}"
        ) from exc
