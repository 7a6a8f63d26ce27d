"""
Support inbox models and schemas.

Dependencies: pydantic
System role: Support API contracts
"""

import uuid
from datetime import datetime

from pydantic import Field

from portal_messaging.models.common import CamelModel


class CreateSupportMessageRequest(CamelModel):
    """Request body for posting a support message."""

    content: str = Field(min_length=1, description="Message text")
    thread_id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        min_length=1,
        description="Thread to append to; a new thread is started when omitted",
    )


class NewSupportMessage(CamelModel):
    """Support message to be persisted for an authenticated user."""

    user_id: str = Field(min_length=1)
    content: str = Field(min_length=1)
    thread_id: str = Field(min_length=1)
    timestamp: datetime | None = None
    is_read: bool = False


class SupportMessage(CamelModel):
    """Persisted support message."""

    id: int
    user_id: str
    content: str
    timestamp: datetime
    is_read: bool
    thread_id: str
