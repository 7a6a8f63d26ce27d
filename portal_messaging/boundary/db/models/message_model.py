"""
Chat message ORM model.

Dependencies: sqlalchemy, portal_messaging.boundary.db.base
System role: Append-only message persistence for chat sessions
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portal_messaging.boundary.db.base import Base, utc_now


class MessageModel(Base):
    """
    Chat message row.

    Attributes:
        id: Serial primary key, unique across all sessions
        session_id: Owning chat session (indexed, cascades on delete)
        role: Sender type ('user' or 'assistant')
        content: Message text
        timestamp: Creation time (UTC)
    """

    __tablename__ = "messages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    session_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("chat_sessions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    role: Mapped[str] = mapped_column(String(32), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )

    session = relationship("ChatSessionModel", back_populates="messages")
