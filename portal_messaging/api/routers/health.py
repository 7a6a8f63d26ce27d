"""
Health check API endpoints.

Routes: GET /health, GET /health/db

Dependencies: portal_messaging.application.services
System role: Health check HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from portal_messaging.api.deps import get_conversation_store
from portal_messaging.application.services import ConversationStore
from portal_messaging.core.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/db", response_model=HealthResponse)
async def health_check_db(
    store: ConversationStore = Depends(get_conversation_store),
) -> HealthResponse:
    """Database health check; 503 when storage is unreachable."""
    try:
        await store.ping()
    except PersistenceError as e:
        logger.warning("Database health check failed", extra={"error": str(e)})
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database unavailable",
        )
    return HealthResponse(status="healthy", message="Database connection OK")
