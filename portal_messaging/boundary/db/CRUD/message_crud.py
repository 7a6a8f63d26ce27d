"""
Chat message CRUD operations.

Provides session-scoped message queries in canonical order.

Dependencies: sqlalchemy, portal_messaging.boundary.db.models
System role: Chat message persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from portal_messaging.boundary.db.CRUD.base_crud import BaseCRUD
from portal_messaging.boundary.db.models.message_model import MessageModel


class MessageCRUD(BaseCRUD[MessageModel]):
    """
    CRUD operations for MessageModel.

    Extends BaseCRUD with per-session retrieval ordered by timestamp.
    """

    def __init__(self) -> None:
        """Initialize MessageCRUD with MessageModel."""
        super().__init__(MessageModel)

    async def get_by_session(
        self,
        session: AsyncSession,
        session_id: str,
    ) -> Sequence[MessageModel]:
        """
        Retrieve all messages for a chat session, oldest first.

        Equal timestamps fall back to insertion order (id).

        Args:
            session: Async database session
            session_id: Chat session identifier

        Returns:
            Sequence of MessageModel rows (empty when none exist)
        """
        stmt = (
            select(MessageModel)
            .where(MessageModel.session_id == session_id)
            .order_by(MessageModel.timestamp.asc(), MessageModel.id.asc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()


message_crud = MessageCRUD()
