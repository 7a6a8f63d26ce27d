"""
Realtime message handling.

Validates inbound WebSocket envelopes, persists chat messages through
the conversation store, and fans events out through the connection
manager. Chat messages are echoed to every client including the sender;
typing indicators go to everyone except the sender.

Dependencies: pydantic, portal_messaging.core, portal_messaging.application.services
System role: Realtime broadcast use cases
"""

import json
import logging
from typing import Any

from fastapi import WebSocket
from pydantic import ValidationError as PydanticValidationError

from portal_messaging.application.services.conversation_store import ConversationStore
from portal_messaging.core.connection_manager import ConnectionManager
from portal_messaging.core.exceptions import ProtocolError
from portal_messaging.models.chat import NewMessage
from portal_messaging.models.realtime import (
    INVALID_FORMAT_ERROR,
    INVALID_PAYLOAD_ERROR,
    PROCESSING_ERROR,
    EventType,
    InboundEnvelope,
    OutboundEvent,
    error_frame,
)
from portal_messaging.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


def parse_envelope(data: Any) -> InboundEnvelope:
    """
    Validate a decoded frame as an inbound envelope.

    Args:
        data: Result of json.loads on the raw frame

    Returns:
        InboundEnvelope: Validated envelope

    Raises:
        ProtocolError: If data is not an object or lacks type/sessionId
    """
    if not isinstance(data, dict):
        raise ProtocolError(INVALID_FORMAT_ERROR)
    try:
        return InboundEnvelope.model_validate(data)
    except PydanticValidationError as e:
        raise ProtocolError(INVALID_FORMAT_ERROR, details={"errors": e.error_count()}) from e


class RealtimeService:
    """Per-frame handler for the broadcast endpoint."""

    def __init__(self, store: ConversationStore, manager: ConnectionManager) -> None:
        """
        Args:
            store: Conversation store used to persist chat messages
            manager: Registry of connected clients
        """
        self.store = store
        self.manager = manager

    async def handle_frame(self, websocket: WebSocket, raw: str) -> None:
        """
        Process one inbound text frame.

        Never raises for bad input: protocol problems are answered with an
        error frame to the sender only, and the connection stays open.

        Args:
            websocket: Connection the frame arrived on
            raw: Raw frame text
        """
        try:
            await self._dispatch(websocket, raw)
        except ProtocolError as e:
            logger.warning("Rejected realtime frame", extra={"reason": e.message})
            await self.manager.send(websocket, error_frame(e.message))
        except Exception as e:
            log_exception_with_context(
                logger,
                "Error processing WebSocket message",
                e,
                raw_frame=raw,
            )
            await self.manager.send(websocket, error_frame(PROCESSING_ERROR))

    async def _dispatch(self, websocket: WebSocket, raw: str) -> None:
        envelope = parse_envelope(json.loads(raw))

        if envelope.type == EventType.MESSAGE.value:
            await self._handle_message(envelope)
        elif envelope.type == EventType.TYPING.value:
            await self._handle_typing(websocket, envelope)
        else:
            logger.info(
                "Unknown message type",
                extra={"event_type": envelope.type, "session_id": envelope.session_id},
            )

    async def _handle_message(self, envelope: InboundEnvelope) -> None:
        content = envelope.payload.get("content")
        role = envelope.payload.get("role")
        if not content or not role:
            raise ProtocolError(INVALID_PAYLOAD_ERROR)

        stored = await self.store.add_message(
            NewMessage(session_id=envelope.session_id, role=role, content=content)
        )
        event = OutboundEvent(
            type=EventType.MESSAGE,
            payload=stored.to_wire(),
            session_id=envelope.session_id,
        )
        delivered = await self.manager.broadcast(event.to_wire())
        logger.info(
            "Chat message broadcast",
            extra={
                "session_id": envelope.session_id,
                "message_id": stored.id,
                "delivered": delivered,
            },
        )

    async def _handle_typing(self, websocket: WebSocket, envelope: InboundEnvelope) -> None:
        is_typing = envelope.payload.get("isTyping")
        event = OutboundEvent(
            type=EventType.TYPING,
            payload={"isTyping": True if is_typing is None else is_typing},
            session_id=envelope.session_id,
        )
        await self.manager.broadcast(event.to_wire(), exclude=websocket)
