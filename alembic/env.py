"""Alembic environment for the event store.

The database comes from Settings (DATABASE_URL), never from alembic.ini, and
online migrations run on the same engine configuration the services use.
"""

import asyncio
import logging
from logging.config import fileConfig

from alembic import context
from sqlalchemy.engine import Connection

from config.settings import load_settings
from src.dex_common.database import create_engine, verify_connection

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

logger = logging.getLogger("alembic.env")

target_metadata = None  # Raw SQL revisions in versions/, no autogenerate

# Raises ConfigurationError when DATABASE_URL is missing or malformed.
settings = load_settings()


def run_migrations_offline() -> None:
    """Emit the DDL as SQL script output instead of executing it."""
    context.configure(
        url=settings.DATABASE_URL,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        transaction_per_migration=True,
    )
    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    engine = create_engine(settings)
    try:
        # ConnectionFailedError here instead of a raw driver traceback.
        await verify_connection(engine)
        async with engine.connect() as connection:
            await connection.run_sync(do_run_migrations)
    finally:
        await engine.dispose()


def run_migrations_online() -> None:
    logger.info("Running event store migrations")
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
