"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory SQLite engine with the messaging schema, SQL store,
in-memory store double, identity headers
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import pytest

from tests.fakes import InMemoryConversationStore


@pytest.fixture
async def test_async_engine():
    """
    Create in-memory SQLite async engine with all tables and FK enforcement.

    Yields:
        AsyncEngine: Engine bound to a single shared in-memory connection
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import StaticPool

    from portal_messaging.boundary.db.connection import enable_sqlite_foreign_keys
    from portal_messaging.boundary.db.create_tables import create_tables, drop_tables

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)

    async with engine.begin() as conn:
        await conn.run_sync(create_tables)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(drop_tables)

    await engine.dispose()


@pytest.fixture
def session_factory(test_async_engine):
    """Async session factory bound to the test engine."""
    from portal_messaging.boundary.db.connection import get_async_session_factory

    return get_async_session_factory(test_async_engine)


@pytest.fixture
def sql_store(session_factory):
    """SqlConversationStore over the in-memory SQLite database."""
    from portal_messaging.application.services.conversation_store import SqlConversationStore

    return SqlConversationStore(session_factory)


@pytest.fixture
def memory_store() -> InMemoryConversationStore:
    """Fresh in-memory ConversationStore double."""
    return InMemoryConversationStore()


@pytest.fixture
def user_headers() -> dict[str, str]:
    """Identity headers for a regular member."""
    return {"X-User-Id": "user-1", "X-User-Role": "member"}


@pytest.fixture
def admin_headers() -> dict[str, str]:
    """Identity headers for an admin."""
    return {"X-User-Id": "admin-1", "X-User-Role": "admin"}
