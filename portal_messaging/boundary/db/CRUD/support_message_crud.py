"""
Support message CRUD operations.

Provides user-scoped and admin-wide inbox queries plus read marking.

Dependencies: sqlalchemy, portal_messaging.boundary.db.models
System role: Support inbox persistence operations
"""

from typing import Sequence

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from portal_messaging.boundary.db.CRUD.base_crud import BaseCRUD
from portal_messaging.boundary.db.models.support_message_model import SupportMessageModel

_NEWEST_FIRST = (SupportMessageModel.timestamp.desc(), SupportMessageModel.id.desc())


class SupportMessageCRUD(BaseCRUD[SupportMessageModel]):
    """CRUD operations for SupportMessageModel."""

    def __init__(self) -> None:
        """Initialize SupportMessageCRUD with SupportMessageModel."""
        super().__init__(SupportMessageModel)

    async def get_by_user(
        self,
        session: AsyncSession,
        user_id: str,
    ) -> Sequence[SupportMessageModel]:
        """
        Retrieve one user's support messages, newest first.

        Args:
            session: Async database session
            user_id: Sender identifier

        Returns:
            Sequence of SupportMessageModel rows owned by user_id
        """
        stmt = (
            select(SupportMessageModel)
            .where(SupportMessageModel.user_id == user_id)
            .order_by(*_NEWEST_FIRST)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_all_newest_first(
        self,
        session: AsyncSession,
    ) -> Sequence[SupportMessageModel]:
        """
        Retrieve every support message across users, newest first.

        Args:
            session: Async database session

        Returns:
            Sequence of SupportMessageModel rows
        """
        stmt = select(SupportMessageModel).order_by(*_NEWEST_FIRST)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def mark_as_read(self, session: AsyncSession, id: int) -> bool:
        """
        Set is_read on a single support message.

        Args:
            session: Async database session
            id: Support message primary key

        Returns:
            True if a row matched (already-read rows included), False otherwise
        """
        stmt = (
            update(SupportMessageModel)
            .where(SupportMessageModel.id == id)
            .values(is_read=True)
        )
        result = await session.execute(stmt)
        return result.rowcount > 0


support_message_crud = SupportMessageCRUD()
