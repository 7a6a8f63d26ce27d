"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from portal_messaging.boundary.db.CRUD import message_crud

    messages = await message_crud.get_by_session(db, session_id)
"""

from portal_messaging.boundary.db.CRUD.base_crud import BaseCRUD
from portal_messaging.boundary.db.CRUD.chat_session_crud import ChatSessionCRUD, chat_session_crud
from portal_messaging.boundary.db.CRUD.message_crud import MessageCRUD, message_crud
from portal_messaging.boundary.db.CRUD.support_message_crud import (
    SupportMessageCRUD,
    support_message_crud,
)

__all__ = [
    "BaseCRUD",
    "ChatSessionCRUD",
    "chat_session_crud",
    "MessageCRUD",
    "message_crud",
    "SupportMessageCRUD",
    "support_message_crud",
]
