"""
Database connection management.

Provides the async SQLAlchemy engine and session factory. The API builds
one engine per process; the Lambda builds one per invocation because the
pool is bound to the event loop.

Dependencies: sqlalchemy, asyncpg, agency_rag.configs
System role: Database connection lifecycle management
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    async_sessionmaker,
    create_async_engine,
)

from agency_rag.configs import get_settings
from agency_rag.configs.database import DatabaseSettings


def get_async_engine(db_config: DatabaseSettings | None = None) -> AsyncEngine:
    """
    Create async SQLAlchemy engine with connection pooling.

    pool_pre_ping=True verifies connections before use to detect
    stale connections early.

    Args:
        db_config: Database settings (defaults to the process settings)

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine
    """
    db_config = db_config or get_settings().database

    return create_async_engine(
        db_config.async_database_url,
        echo=db_config.echo_sql,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_pre_ping=True,
    )


def get_async_session_factory(engine: AsyncEngine | None = None) -> async_sessionmaker:
    """
    Create async session factory for database operations.

    Sessions use autoflush=False and expire_on_commit=False so loaded
    records stay readable after a commit.

    Args:
        engine: Engine to bind (a new one is created when omitted)

    Returns:
        async_sessionmaker: Async session factory

    Usage:
        SessionFactory = get_async_session_factory()
        async with SessionFactory() as session:
            ...
    """
    return async_sessionmaker(
        bind=engine or get_async_engine(),
        autoflush=False,
        expire_on_commit=False,
    )

