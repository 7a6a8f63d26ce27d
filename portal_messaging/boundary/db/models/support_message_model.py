"""
Support message ORM model.

Dependencies: sqlalchemy, portal_messaging.boundary.db.base
System role: Support-ticket inbox persistence
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String, Text, false
from sqlalchemy.orm import Mapped, mapped_column

from portal_messaging.boundary.db.base import Base, utc_now


class SupportMessageModel(Base):
    """
    Support message row.

    Independent of chat sessions. is_read is the only mutable column.

    Attributes:
        id: Serial primary key
        user_id: Authenticated sender (indexed)
        content: Message text
        timestamp: Creation time (UTC)
        is_read: Read flag, false until explicitly marked
        thread_id: Conversation thread grouping (indexed)
    """

    __tablename__ = "support_messages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
    is_read: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        server_default=false(),
        nullable=False,
    )
    thread_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
