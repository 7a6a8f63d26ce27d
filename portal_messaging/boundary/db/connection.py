"""
Database connection management.

Provides the async SQLAlchemy engine, session factory, and FastAPI
dependency for database session injection.

Dependencies: sqlalchemy, portal_messaging.configs
System role: Database connection lifecycle management
"""

from functools import lru_cache

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import AsyncAdaptedQueuePool

from portal_messaging.configs import get_settings


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """
    Turn on foreign key enforcement for every SQLite connection.

    SQLite ignores FOREIGN KEY / ON DELETE CASCADE unless the pragma is set
    per connection.

    Args:
        engine: Async engine bound to a SQLite database
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ARG001
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


@lru_cache
def get_async_engine() -> AsyncEngine:
    """
    Create async SQLAlchemy engine with connection pooling.

    Configures AsyncAdaptedQueuePool for efficient connection reuse.
    pool_pre_ping=True verifies connections before use to detect
    stale/broken connections early. SQLite URLs get the driver's default
    pool and foreign key enforcement instead.

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine (cached)

    Raises:
        ArgumentError: If database URL is invalid or engine creation fails

    Usage:
        engine = get_async_engine()
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
    """
    db_config = get_settings().database

    if db_config.is_sqlite:
        engine = create_async_engine(db_config.async_database_url, echo=db_config.echo_sql)
        enable_sqlite_foreign_keys(engine)
        return engine

    return create_async_engine(
        db_config.async_database_url,
        echo=db_config.echo_sql,
        poolclass=AsyncAdaptedQueuePool,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
        pool_pre_ping=True,
    )


def get_async_session_factory(engine: AsyncEngine | None = None) -> async_sessionmaker:
    """
    Create async session factory for database operations.

    Returns async_sessionmaker bound to the engine with autoflush=False
    and expire_on_commit=False so committed rows stay readable.

    Args:
        engine: Optional engine override (defaults to the configured engine)

    Returns:
        async_sessionmaker: Async session factory configured for manual transaction control

    Usage:
        SessionFactory = get_async_session_factory()
        async with SessionFactory() as session:
            session.add(obj)
            await session.commit()
    """
    return async_sessionmaker(
        bind=engine or get_async_engine(),
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


async def dispose_engine() -> None:
    """Close pooled connections held by the cached engine."""
    if get_async_engine.cache_info().currsize:
        await get_async_engine().dispose()
        get_async_engine.cache_clear()
