"""Database connection and session management.

Provides async database engine and session factory for PostgreSQL
(or SQLite for local runs).
"""

from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from board.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    kwargs: dict[str, Any] = {
        "echo": settings.debug,  # Log SQL queries in debug mode
        "pool_pre_ping": True,  # Verify connections before using
    }
    if settings.database_url.startswith("sqlite"):
        engine = create_async_engine(settings.database_url, **kwargs)
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    kwargs["pool_size"] = settings.database.pool_size
    kwargs["max_overflow"] = settings.database.max_overflow
    return create_async_engine(settings.database_url, **kwargs)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite leaves foreign keys off per connection; PostgreSQL always checks them
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
        autocommit=False,  # Explicit transaction management
    )
