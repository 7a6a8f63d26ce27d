"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: fastapi, portal_messaging.configs, portal_messaging.application,
portal_messaging.boundary
System role: DI container for service injection
"""

from fastapi import Depends, HTTPException, Request, WebSocket, status

from portal_messaging.api.deps.identity import IdentityProvider, RequestIdentityProvider
from portal_messaging.application.services import (
    ConversationStore,
    RealtimeService,
    SqlConversationStore,
)
from portal_messaging.boundary.db import get_async_session_factory
from portal_messaging.configs import get_settings
from portal_messaging.core.connection_manager import ConnectionManager
from portal_messaging.models.identity import Identity


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self) -> None:
        self._conversation_store: ConversationStore | None = None

    @property
    def conversation_store(self) -> ConversationStore:
        """Get cached SQL conversation store."""
        if self._conversation_store is None:
            self._conversation_store = SqlConversationStore(get_async_session_factory())
        return self._conversation_store

    def clear(self) -> None:
        """Clear all cached instances."""
        self._conversation_store = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_conversation_store() -> ConversationStore:
    """
    Get the conversation store.

    Returns:
        ConversationStore: Shared store (override in tests with a double)
    """
    return get_service_cache().conversation_store


def get_identity_provider() -> IdentityProvider:
    """Get the identity collaborator configured from auth settings."""
    return RequestIdentityProvider(get_settings().auth)


def get_current_identity(
    request: Request,
    provider: IdentityProvider = Depends(get_identity_provider),
) -> Identity | None:
    """
    Resolve the caller's identity.

    Returns:
        Identity | None: Authenticated identity, None for anonymous callers
    """
    return provider.get_identity(request)


def require_identity(
    identity: Identity | None = Depends(get_current_identity),
) -> Identity:
    """
    Reject anonymous callers before any store access.

    Raises:
        HTTPException(401): No authenticated identity on the request
    """
    if identity is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return identity


def get_connection_manager(websocket: WebSocket) -> ConnectionManager:
    """
    Get the application's connection registry.

    The registry is created in create_app() and lives on app.state.
    """
    return websocket.app.state.connection_manager


def get_realtime_service(
    manager: ConnectionManager = Depends(get_connection_manager),
    store: ConversationStore = Depends(get_conversation_store),
) -> RealtimeService:
    """
    Get realtime service bound to the shared store and connection registry.

    Returns:
        RealtimeService: Frame handler for one WebSocket connection
    """
    return RealtimeService(store=store, manager=manager)
