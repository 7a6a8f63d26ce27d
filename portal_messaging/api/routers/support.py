"""
Support inbox API endpoints.

All routes require an authenticated identity.

Routes:
- GET /support - Admins see every message, others only their own
- PATCH /support/{message_id}/read - Mark a message read
- POST /support - Post a message to a (new or existing) thread

Dependencies: portal_messaging.application.services, portal_messaging.models
System role: Support inbox HTTP API
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from portal_messaging.api.deps import get_conversation_store, require_identity
from portal_messaging.api.routers.router_utils import handle_store_errors
from portal_messaging.application.services import ConversationStore
from portal_messaging.boundary.db.base import utc_now
from portal_messaging.models.common import SuccessResponse
from portal_messaging.models.identity import Identity
from portal_messaging.models.support import (
    CreateSupportMessageRequest,
    NewSupportMessage,
    SupportMessage,
)

logger = logging.getLogger(__name__)

# support_messages.id is a 32-bit serial
MAX_MESSAGE_ID = 2**31 - 1

router = APIRouter(prefix="/support", tags=["support"])


@router.get("", response_model=list[SupportMessage])
@handle_store_errors("Failed to fetch messages")
async def list_support_messages(
    identity: Identity = Depends(require_identity),
    store: ConversationStore = Depends(get_conversation_store),
) -> list[SupportMessage]:
    """List support messages newest first, scoped by the caller's role."""
    if identity.is_admin:
        return await store.get_support_messages_for_admin()
    return await store.get_support_messages(identity.user_id)


@router.patch("/{message_id}/read", response_model=SuccessResponse)
@handle_store_errors("Failed to update message")
async def mark_support_message_read(
    message_id: str,
    identity: Identity = Depends(require_identity),
    store: ConversationStore = Depends(get_conversation_store),
) -> SuccessResponse:
    """
    Mark one support message as read.

    Raises:
        HTTPException(401): Anonymous caller
        HTTPException(404): No message with this id
        HTTPException(500): Storage failure
    """
    try:
        numeric_id = int(message_id)
    except ValueError:
        numeric_id = None
    if numeric_id is None or not 0 < numeric_id <= MAX_MESSAGE_ID:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Message not found")

    updated = await store.mark_support_message_as_read(numeric_id)
    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Message not found")

    logger.info(
        "Support message marked read",
        extra={"message_id": numeric_id, "user_id": identity.user_id},
    )
    return SuccessResponse()


@router.post("", response_model=SupportMessage, status_code=status.HTTP_201_CREATED)
@handle_store_errors("Failed to send message")
async def post_support_message(
    payload: Any = Body(default=None),
    identity: Identity = Depends(require_identity),
    store: ConversationStore = Depends(get_conversation_store),
) -> SupportMessage:
    """
    Post a support message as the caller.

    Args:
        payload: {content, threadId?}; a new thread id is generated when omitted

    Returns:
        SupportMessage: Stored message (isRead false)
    """
    request = CreateSupportMessageRequest.model_validate(payload)
    return await store.add_support_message(
        NewSupportMessage(
            user_id=identity.user_id,
            content=request.content,
            thread_id=request.thread_id,
            timestamp=utc_now(),
            is_read=False,
        )
    )
