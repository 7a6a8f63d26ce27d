"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base: Model building block
  - get_async_engine(), get_async_session_factory(): Async connection management
  - ChatSessionModel, MessageModel, SupportMessageModel: Persisted entities
  - chat_session_crud, message_crud, support_message_crud: CRUD singletons

Dependencies: sqlalchemy, portal_messaging.configs
System role: Database adapter providing persistent storage for chat
sessions, their messages, and the support inbox.
"""

from portal_messaging.boundary.db.base import Base
from portal_messaging.boundary.db.connection import (
    dispose_engine,
    get_async_engine,
    get_async_session_factory,
)
from portal_messaging.boundary.db.models import (
    ChatSessionModel,
    MessageModel,
    SupportMessageModel,
)
from portal_messaging.boundary.db.CRUD import (
    BaseCRUD,
    ChatSessionCRUD,
    MessageCRUD,
    SupportMessageCRUD,
    chat_session_crud,
    message_crud,
    support_message_crud,
)

__all__ = [
    # Base classes
    "Base",
    # Connection
    "dispose_engine",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "ChatSessionModel",
    "MessageModel",
    "SupportMessageModel",
    # CRUD classes
    "BaseCRUD",
    "ChatSessionCRUD",
    "MessageCRUD",
    "SupportMessageCRUD",
    # CRUD singletons
    "chat_session_crud",
    "message_crud",
    "support_message_crud",
]
