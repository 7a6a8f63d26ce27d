"""
Realtime envelope schemas for the WebSocket broadcast server.

Dependencies: pydantic
System role: Realtime protocol schemas
"""

from enum import Enum
from typing import Any

from pydantic import Field, field_validator

from portal_messaging.models.common import CamelModel

INVALID_FORMAT_ERROR = "Invalid message format. Must include type and sessionId."
INVALID_PAYLOAD_ERROR = "Invalid message payload. Must include content and role."
PROCESSING_ERROR = "Failed to process message"


class EventType(str, Enum):
    """Envelope types understood by the server."""

    MESSAGE = "message"
    TYPING = "typing"


class InboundEnvelope(CamelModel):
    """
    Client-to-server frame.

    Attributes:
        type: Event type (unknown types are tolerated and ignored)
        session_id: Chat session the event belongs to
        payload: Event-specific body
    """

    type: str = Field(min_length=1)
    session_id: str = Field(min_length=1)
    payload: dict[str, Any] = Field(default_factory=dict)

    @field_validator("payload", mode="before")
    @classmethod
    def _null_payload_is_empty(cls, value: Any) -> Any:
        return {} if value is None else value


class OutboundEvent(CamelModel):
    """
    Server-to-client broadcast frame.

    Attributes:
        type: Event type
        payload: Event-specific body
        session_id: Chat session clients filter on
    """

    type: EventType
    payload: dict[str, Any]
    session_id: str


def error_frame(message: str) -> dict[str, str]:
    """Frame sent only to the offending client."""
    return {"error": message}
