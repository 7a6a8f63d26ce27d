"""
Conversation store.

Sole owner of persistence for chat sessions, their messages, and the
support inbox. HTTP routes and the realtime server depend on the
ConversationStore protocol only; SqlConversationStore is the production
implementation on top of an async SQLAlchemy session factory.

Each operation runs in its own short transaction. Storage failures are
re-raised as PersistenceError chained to the original SQLAlchemy error.

Dependencies: sqlalchemy, portal_messaging.boundary.db, portal_messaging.models
System role: Conversation persistence use cases
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Protocol, runtime_checkable

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from portal_messaging.boundary.db.base import to_utc, utc_now
from portal_messaging.boundary.db.CRUD import (
    chat_session_crud,
    message_crud,
    support_message_crud,
)
from portal_messaging.core.exceptions import PersistenceError, ValidationError
from portal_messaging.models.chat import ChatSession, Message, NewMessage
from portal_messaging.models.support import NewSupportMessage, SupportMessage

logger = logging.getLogger(__name__)


@runtime_checkable
class ConversationStore(Protocol):
    """Persistence capability consumed by the route layer and realtime server."""

    async def create_chat_session(self, contact_info: dict | None = None) -> str: ...

    async def get_chat_session(self, session_id: str) -> ChatSession | None: ...

    async def get_messages(self, session_id: str) -> list[Message]: ...

    async def add_message(self, message: NewMessage) -> Message: ...

    async def get_support_messages(self, user_id: str) -> list[SupportMessage]: ...

    async def get_support_messages_for_admin(self) -> list[SupportMessage]: ...

    async def add_support_message(self, message: NewSupportMessage) -> SupportMessage: ...

    async def mark_support_message_as_read(self, message_id: int) -> bool: ...

    async def ping(self) -> None: ...


def require_text(value: str | None, field: str) -> str:
    """
    Reject missing or whitespace-only required fields.

    Args:
        value: Candidate field value
        field: Wire name of the field, reported in the error

    Returns:
        str: The unchanged value

    Raises:
        ValidationError: If value is None or blank
    """
    if value is None or not str(value).strip():
        raise ValidationError(f"{field} is required", field=field)
    return value


class SqlConversationStore:
    """ConversationStore backed by SQLAlchemy async sessions."""

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """
        Initialize store with a session factory.

        Args:
            session_factory: async_sessionmaker bound to the messaging database
        """
        self._session_factory = session_factory

    @asynccontextmanager
    async def _transaction(self, operation: str) -> AsyncIterator[AsyncSession]:
        """Open a session, commit on success, convert storage errors."""
        async with self._session_factory() as db:
            try:
                yield db
                await db.commit()
            except SQLAlchemyError as e:
                await db.rollback()
                logger.error(
                    "Conversation store operation failed",
                    extra={"operation": operation, "error_type": type(e).__name__},
                )
                raise PersistenceError(
                    f"Storage failure during {operation}",
                    operation=operation,
                ) from e

    async def create_chat_session(self, contact_info: dict | None = None) -> str:
        """
        Create a new chat session.

        Args:
            contact_info: Optional contact metadata

        Returns:
            str: Generated session ID

        Raises:
            PersistenceError: If the insert fails
        """
        async with self._transaction("create_chat_session") as db:
            session = await chat_session_crud.create(db, contact_info=contact_info)
            session_id = session.id
        logger.info("Chat session created", extra={"session_id": session_id})
        return session_id

    async def get_chat_session(self, session_id: str) -> ChatSession | None:
        """Point lookup; None when no session has this ID."""
        async with self._transaction("get_chat_session") as db:
            session = await chat_session_crud.get_by_id(db, session_id)
            return ChatSession.model_validate(session) if session else None

    async def get_messages(self, session_id: str) -> list[Message]:
        """All messages of a session, oldest first. Unknown sessions yield []."""
        async with self._transaction("get_messages") as db:
            rows = await message_crud.get_by_session(db, session_id)
            return [Message.model_validate(row) for row in rows]

    async def add_message(self, message: NewMessage) -> Message:
        """
        Append a message to its session.

        Args:
            message: Message to persist; timestamp defaults to now

        Returns:
            Message: Stored row including its assigned ID

        Raises:
            ValidationError: If sessionId, role, or content is blank
            PersistenceError: If the session does not exist or the insert fails
        """
        require_text(message.session_id, "sessionId")
        require_text(message.role.value if message.role else None, "role")
        require_text(message.content, "content")

        async with self._transaction("add_message") as db:
            row = await message_crud.create(
                db,
                session_id=message.session_id,
                role=message.role.value,
                content=message.content,
                timestamp=to_utc(message.timestamp or utc_now()),
            )
            stored = Message.model_validate(row)
        logger.debug(
            "Message stored",
            extra={"session_id": stored.session_id, "message_id": stored.id},
        )
        return stored

    async def get_support_messages(self, user_id: str) -> list[SupportMessage]:
        """One user's support messages, newest first."""
        async with self._transaction("get_support_messages") as db:
            rows = await support_message_crud.get_by_user(db, user_id)
            return [SupportMessage.model_validate(row) for row in rows]

    async def get_support_messages_for_admin(self) -> list[SupportMessage]:
        """Every user's support messages, newest first. Callers authorize."""
        async with self._transaction("get_support_messages_for_admin") as db:
            rows = await support_message_crud.get_all_newest_first(db)
            return [SupportMessage.model_validate(row) for row in rows]

    async def add_support_message(self, message: NewSupportMessage) -> SupportMessage:
        """
        Persist a support message.

        Raises:
            ValidationError: If userId, content, or threadId is blank
            PersistenceError: If the insert fails
        """
        require_text(message.user_id, "userId")
        require_text(message.content, "content")
        require_text(message.thread_id, "threadId")

        async with self._transaction("add_support_message") as db:
            row = await support_message_crud.create(
                db,
                user_id=message.user_id,
                content=message.content,
                thread_id=message.thread_id,
                timestamp=to_utc(message.timestamp or utc_now()),
                is_read=message.is_read,
            )
            return SupportMessage.model_validate(row)

    async def mark_support_message_as_read(self, message_id: int) -> bool:
        """
        Mark a support message as read.

        Marking an already-read message again also returns True.

        Returns:
            bool: False only when no message has this ID
        """
        async with self._transaction("mark_support_message_as_read") as db:
            return await support_message_crud.mark_as_read(db, message_id)

    async def ping(self) -> None:
        """Round-trip to the database; raises PersistenceError when unreachable."""
        async with self._transaction("ping") as db:
            await db.execute(text("SELECT 1"))
