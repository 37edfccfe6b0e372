"""
Alembic Migration Environment
===============================

Applies the questions/answers schema over a single asyncpg connection.
The URL is taken from DATABASE_URL through app.config; alembic.ini only
carries logging. SQL-script (`--sql`) mode is not supported.
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.ext.asyncio import create_async_engine
from alembic import context

from app.config import settings
from app.database import Base

# Registers both tables on Base.metadata
from app.models import answer, question  # noqa: F401

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)


def apply_schema(connection) -> None:
    context.configure(connection=connection, target_metadata=Base.metadata)
    with context.begin_transaction():
        context.run_migrations()


async def migrate() -> None:
    engine = create_async_engine(settings.database_url, poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(apply_schema)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    raise RuntimeError("Offline migrations are not supported; run against a live database")

asyncio.run(migrate())
