"""
Chat session CRUD operations.

Dependencies: sqlalchemy, portal_messaging.boundary.db.models
System role: Chat session persistence operations
"""

from portal_messaging.boundary.db.CRUD.base_crud import BaseCRUD
from portal_messaging.boundary.db.models.chat_session_model import ChatSessionModel


class ChatSessionCRUD(BaseCRUD[ChatSessionModel]):
    """CRUD operations for ChatSessionModel."""

    def __init__(self) -> None:
        """Initialize ChatSessionCRUD with ChatSessionModel."""
        super().__init__(ChatSessionModel)


chat_session_crud = ChatSessionCRUD()
