"""
Test suite for the schema bootstrap.

Covers idempotent creation, indexes, drop order, seed data, and the
single-transaction rollback of bootstrap_database().

System role: Verification of database schema initialization
"""

import pytest
from sqlalchemy import func, inspect, select
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from portal_messaging.boundary.db import create_tables as bootstrap
from portal_messaging.boundary.db.connection import enable_sqlite_foreign_keys
from portal_messaging.boundary.db.models import (
    ChatSessionModel,
    MessageModel,
    SupportMessageModel,
)

EXPECTED_TABLES = {"chat_sessions", "messages", "support_messages"}


@pytest.fixture
async def empty_engine():
    """In-memory SQLite engine without any tables."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    yield engine
    await engine.dispose()


async def table_names(engine) -> set[str]:
    async with engine.connect() as conn:
        return set(await conn.run_sync(lambda c: inspect(c).get_table_names()))


async def count_rows(engine, model) -> int:
    async with engine.connect() as conn:
        return await conn.scalar(select(func.count()).select_from(model))


class TestCreateTables:
    @pytest.mark.asyncio
    async def test_creates_all_tables(self, empty_engine) -> None:
        async with empty_engine.begin() as conn:
            await conn.run_sync(bootstrap.create_tables)

        assert await table_names(empty_engine) == EXPECTED_TABLES

    @pytest.mark.asyncio
    async def test_is_idempotent(self, empty_engine) -> None:
        for _ in range(2):
            async with empty_engine.begin() as conn:
                await conn.run_sync(bootstrap.create_tables)

        assert await table_names(empty_engine) == EXPECTED_TABLES

    @pytest.mark.asyncio
    async def test_creates_lookup_indexes(self, empty_engine) -> None:
        async with empty_engine.begin() as conn:
            await conn.run_sync(bootstrap.create_tables)

        def indexed_columns(sync_conn, table: str) -> set[str]:
            return {
                column
                for index in inspect(sync_conn).get_indexes(table)
                for column in index["column_names"]
            }

        async with empty_engine.connect() as conn:
            message_columns = await conn.run_sync(indexed_columns, "messages")
            support_columns = await conn.run_sync(indexed_columns, "support_messages")

        assert "session_id" in message_columns
        assert {"user_id", "thread_id"} <= support_columns


class TestDropTables:
    @pytest.mark.asyncio
    async def test_drops_all_tables_with_data_present(self, empty_engine) -> None:
        await bootstrap.bootstrap_database(empty_engine, seed=True)

        async with empty_engine.begin() as conn:
            await conn.run_sync(bootstrap.drop_tables)

        assert await table_names(empty_engine) == set()

    @pytest.mark.asyncio
    async def test_drop_on_empty_database_is_safe(self, empty_engine) -> None:
        async with empty_engine.begin() as conn:
            await conn.run_sync(bootstrap.drop_tables)

        assert await table_names(empty_engine) == set()

    def test_messages_dropped_before_chat_sessions(self) -> None:
        order = [table.name for table in reversed(bootstrap.TABLES)]

        assert order.index("messages") < order.index("chat_sessions")


class TestSeedData:
    @pytest.mark.asyncio
    async def test_seed_inserts_sample_rows(self, empty_engine) -> None:
        await bootstrap.bootstrap_database(empty_engine, seed=True)

        assert await count_rows(empty_engine, ChatSessionModel) == 1
        assert await count_rows(empty_engine, MessageModel) == 3
        assert await count_rows(empty_engine, SupportMessageModel) == 2

        async with empty_engine.connect() as conn:
            roles = (
                await conn.execute(select(MessageModel.role).order_by(MessageModel.timestamp))
            ).scalars().all()
            support = (
                await conn.execute(select(SupportMessageModel.user_id, SupportMessageModel.thread_id))
            ).all()

        assert roles == ["assistant", "user", "assistant"]
        assert len({row.user_id for row in support}) == 2
        assert len({row.thread_id for row in support}) == 2


class TestBootstrapDatabase:
    @pytest.mark.asyncio
    async def test_drop_then_create_resets_data(self, empty_engine) -> None:
        await bootstrap.bootstrap_database(empty_engine, seed=True)

        await bootstrap.bootstrap_database(empty_engine, drop=True)

        assert await table_names(empty_engine) == EXPECTED_TABLES
        assert await count_rows(empty_engine, MessageModel) == 0

    @pytest.mark.asyncio
    async def test_failing_step_rolls_back_and_reraises(self, empty_engine, monkeypatch) -> None:
        await bootstrap.bootstrap_database(empty_engine)
        real_seed = bootstrap.create_seed_data

        def seed_then_fail(conn):
            real_seed(conn)
            raise RuntimeError("seed step failed")

        monkeypatch.setattr(bootstrap, "create_seed_data", seed_then_fail)

        with pytest.raises(RuntimeError, match="seed step failed"):
            await bootstrap.bootstrap_database(empty_engine, seed=True)

        assert await count_rows(empty_engine, ChatSessionModel) == 0
        assert await count_rows(empty_engine, SupportMessageModel) == 0
