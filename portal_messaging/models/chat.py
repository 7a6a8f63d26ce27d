"""
Chat domain models and schemas.

Request/response schemas for chat sessions and their messages.

Dependencies: pydantic
System role: Chat API contracts
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import Field

from portal_messaging.models.common import CamelModel


class MessageRole(str, Enum):
    """Sender type of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"


class CreateSessionRequest(CamelModel):
    """Optional body for session creation."""

    contact_info: dict[str, Any] | None = Field(
        default=None,
        description="Contact details collected during the conversation",
    )


class CreateSessionResponse(CamelModel):
    """Response schema for session creation."""

    session_id: str


class ChatSession(CamelModel):
    """Persisted chat session."""

    id: str
    created_at: datetime
    contact_info: dict[str, Any] | None = None


class NewMessage(CamelModel):
    """Message to be appended to a session."""

    session_id: str = Field(min_length=1, description="Owning chat session")
    role: MessageRole = Field(description="Message role: 'user' or 'assistant'")
    content: str = Field(min_length=1, description="Message text")
    timestamp: datetime | None = Field(default=None, description="Defaults to server time")


class Message(CamelModel):
    """Persisted chat message."""

    id: int
    session_id: str
    role: str
    content: str
    timestamp: datetime
