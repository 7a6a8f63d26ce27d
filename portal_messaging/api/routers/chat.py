"""
Chat session API endpoints.

Routes:
- POST /session - Create new chat session
- GET /session/{session_id} - Get chat session
- GET /messages/{session_id} - List session messages (oldest first)
- POST /messages - Append a message

Dependencies: portal_messaging.application.services, portal_messaging.models
System role: Chat session HTTP API
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from portal_messaging.api.deps import get_conversation_store
from portal_messaging.api.routers.router_utils import handle_store_errors
from portal_messaging.application.services import ConversationStore
from portal_messaging.models.chat import (
    ChatSession,
    CreateSessionRequest,
    CreateSessionResponse,
    Message,
    NewMessage,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])


@router.post(
    "/session",
    response_model=CreateSessionResponse,
    status_code=status.HTTP_201_CREATED,
)
@handle_store_errors("Failed to create chat session")
async def create_session(
    payload: Any = Body(default=None),
    store: ConversationStore = Depends(get_conversation_store),
) -> CreateSessionResponse:
    """
    Create a chat session.

    Args:
        payload: Optional body {contactInfo}
        store: Injected ConversationStore

    Returns:
        CreateSessionResponse: {sessionId}

    Raises:
        HTTPException(400): Invalid body
        HTTPException(500): Creation failed
    """
    request = CreateSessionRequest.model_validate(payload or {})
    session_id = await store.create_chat_session(contact_info=request.contact_info)
    return CreateSessionResponse(session_id=session_id)


@router.get("/session/{session_id}", response_model=ChatSession)
@handle_store_errors("Failed to fetch chat session")
async def get_session(
    session_id: str,
    store: ConversationStore = Depends(get_conversation_store),
) -> ChatSession:
    """Get one chat session; 404 when it does not exist."""
    session = await store.get_chat_session(session_id)
    if session is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
    return session


@router.get("/messages/{session_id}", response_model=list[Message])
@handle_store_errors("Failed to fetch messages")
async def list_messages(
    session_id: str,
    store: ConversationStore = Depends(get_conversation_store),
) -> list[Message]:
    """
    List a session's messages in ascending timestamp order.

    Unknown sessions return an empty list.
    """
    return await store.get_messages(session_id)


@router.post(
    "/messages",
    response_model=Message,
    status_code=status.HTTP_201_CREATED,
)
@handle_store_errors("Failed to send message")
async def post_message(
    payload: Any = Body(default=None),
    store: ConversationStore = Depends(get_conversation_store),
) -> Message:
    """
    Validate and persist a chat message.

    Args:
        payload: {sessionId, role, content, timestamp?}
        store: Injected ConversationStore

    Returns:
        Message: Stored message with assigned id and timestamp

    Raises:
        HTTPException(400): Body failed validation
        HTTPException(500): Storage failure (including unknown session)
    """
    message = NewMessage.model_validate(payload)
    return await store.add_message(message)
