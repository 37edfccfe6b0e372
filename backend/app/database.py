"""
QnA Backend — Database Engine & Session Factory
=================================================

What:  Async SQLAlchemy engine construction, session factory, and ORM base.
How:   The composition root (app.main lifespan) calls create_engine() once,
       wraps it with create_session_factory(), and hands the factory to the
       storage-access objects. Nothing here runs at import time.
Who:   Used by app.main, the ORM models and Alembic.

Connection Pooling:
    pool_size=DB_MAX_CONNECTIONS (default 5) and max_overflow=0 make the pool a
    hard upper bound. A request that finds the pool exhausted awaits a free
    connection on the event loop; other requests keep running.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import Settings


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object, which Alembic reads for migrations.
    """
    pass


def create_engine(settings: Settings) -> AsyncEngine:
    """
    Build the bounded async engine described by `settings`.

    Echoes SQL when LOG_LEVEL is DEBUG.
    """
    return create_async_engine(
        settings.database_url,
        pool_size=settings.db_max_connections,
        max_overflow=0,
        pool_pre_ping=settings.db_pool_pre_ping,
        pool_recycle=3600,
        echo=settings.log_level == "DEBUG",
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Session factory shared by every storage-access object.

    expire_on_commit=False keeps row attributes readable after the
    transaction commits.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def dispose_engine(engine: AsyncEngine) -> None:
    """Close all pooled connections. Called during application shutdown."""
    await engine.dispose()
