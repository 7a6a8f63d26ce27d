"""
Chat session ORM model.

Dependencies: sqlalchemy, portal_messaging.boundary.db.base
System role: Conversation scope persistence
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portal_messaging.boundary.db.base import Base, JSONType, utc_now


class ChatSessionModel(Base):
    """
    Chat session row.

    A session owns an ordered sequence of messages. Rows are never
    updated; deleting a session cascades to its messages at the schema
    level (ON DELETE CASCADE), so the ORM side uses passive deletes.

    Attributes:
        id: Opaque uuid4 string, generated server-side
        created_at: Creation timestamp (UTC)
        contact_info: Optional JSON metadata collected during the conversation
        messages: Messages in this session
    """

    __tablename__ = "chat_sessions"

    id: Mapped[str] = mapped_column(
        String(64),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
    contact_info: Mapped[dict | None] = mapped_column(
        JSONType,
        nullable=True,
        default=None,
    )

    messages = relationship(
        "MessageModel",
        back_populates="session",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
