"""
Database schema bootstrap.

Creates and drops the chat_sessions, messages, and support_messages
tables and inserts development seed rows. The step functions take a
synchronous Connection so they run under AsyncConnection.run_sync;
bootstrap_database() wraps the selected steps in one transaction.

Dependencies: sqlalchemy, portal_messaging.configs
System role: Database schema initialization

Usage:
    python -m portal_messaging.boundary.db.create_tables
"""

import asyncio
import logging
import uuid
from datetime import timedelta

from sqlalchemy import Connection, insert
from sqlalchemy.ext.asyncio import AsyncEngine

from portal_messaging.boundary.db.base import utc_now
from portal_messaging.boundary.db.connection import get_async_engine
from portal_messaging.boundary.db.models import (
    ChatSessionModel,
    MessageModel,
    SupportMessageModel,
)
from portal_messaging.configs import get_settings

logger = logging.getLogger(__name__)

# Creation order; dependents come after the tables they reference
TABLES = (
    ChatSessionModel.__table__,
    MessageModel.__table__,
    SupportMessageModel.__table__,
)


def create_tables(conn: Connection) -> None:
    """
    Create all messaging tables and their indexes.

    Idempotent: each table (and its indexes) is only created when
    missing, so repeated calls leave existing tables untouched.

    Args:
        conn: Synchronous SQLAlchemy connection inside a transaction

    Raises:
        SQLAlchemyError: If table creation fails
    """
    for table in TABLES:
        table.create(conn, checkfirst=True)
        logger.info("Ensured table exists", extra={"table": table.name})


def drop_tables(conn: Connection) -> None:
    """
    Drop all messaging tables.

    WARNING: Irreversible data loss. Only use in development and tests.
    messages is dropped before chat_sessions to respect its foreign key.

    Args:
        conn: Synchronous SQLAlchemy connection inside a transaction
    """
    for table in reversed(TABLES):
        table.drop(conn, checkfirst=True)
        logger.info("Dropped table", extra={"table": table.name})


def create_seed_data(conn: Connection) -> str:
    """
    Insert deterministic development rows.

    One chat session with an assistant/user/assistant exchange and two
    support messages from two users in two separate threads.

    Args:
        conn: Synchronous SQLAlchemy connection inside a transaction

    Returns:
        str: ID of the seeded chat session
    """
    session_id = str(uuid.uuid4())
    now = utc_now()

    conn.execute(
        insert(ChatSessionModel.__table__).values(
            id=session_id,
            created_at=now,
            contact_info={"name": "Sample Visitor", "email": "visitor@example.com"},
        )
    )
    conn.execute(
        insert(MessageModel.__table__),
        [
            {
                "session_id": session_id,
                "role": "assistant",
                "content": "Hi there! How can I help you today?",
                "timestamp": now,
            },
            {
                "session_id": session_id,
                "role": "user",
                "content": "When is the next community event?",
                "timestamp": now + timedelta(seconds=1),
            },
            {
                "session_id": session_id,
                "role": "assistant",
                "content": "The calendar page lists all upcoming events.",
                "timestamp": now + timedelta(seconds=2),
            },
        ],
    )
    conn.execute(
        insert(SupportMessageModel.__table__),
        [
            {
                "user_id": "seed-user-1",
                "content": "I cannot upload photos to my listing.",
                "timestamp": now,
                "is_read": False,
                "thread_id": "seed-thread-1",
            },
            {
                "user_id": "seed-user-2",
                "content": "How do I renew my membership?",
                "timestamp": now + timedelta(seconds=1),
                "is_read": False,
                "thread_id": "seed-thread-2",
            },
        ],
    )
    logger.info("Seed data created", extra={"session_id": session_id})
    return session_id


async def bootstrap_database(
    engine: AsyncEngine | None = None,
    *,
    drop: bool = False,
    seed: bool = False,
) -> None:
    """
    Run the schema bootstrap in a single transaction.

    Any failing step rolls back everything done so far and re-raises.

    Args:
        engine: Async engine (defaults to the configured engine)
        drop: Drop existing tables before creating them
        seed: Insert development seed rows after creation

    Raises:
        SQLAlchemyError: If any step fails
    """
    engine = engine or get_async_engine()

    def _run(conn: Connection) -> None:
        if drop:
            drop_tables(conn)
        create_tables(conn)
        if seed:
            create_seed_data(conn)

    async with engine.begin() as conn:
        await conn.run_sync(_run)

    logger.info("Database bootstrap complete", extra={"dropped": drop, "seeded": seed})


if __name__ == "__main__":
    from portal_messaging.observability.logger import configure_logging

    settings = get_settings()
    configure_logging(settings.log_level)
    asyncio.run(bootstrap_database(seed=settings.bootstrap.seed))
