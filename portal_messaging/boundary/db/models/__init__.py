"""
Database models package.

Exports:
  - ChatSessionModel: Chat session ORM model
  - MessageModel: Chat message ORM model
  - SupportMessageModel: Support inbox ORM model

Dependencies: sqlalchemy, portal_messaging.boundary.db.base
System role: Database model definitions for domain entities
"""

from portal_messaging.boundary.db.models.chat_session_model import ChatSessionModel
from portal_messaging.boundary.db.models.message_model import MessageModel
from portal_messaging.boundary.db.models.support_message_model import SupportMessageModel

__all__ = [
    "ChatSessionModel",
    "MessageModel",
    "SupportMessageModel",
]
