"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_connection_manager,
    get_conversation_store,
    get_current_identity,
    get_identity_provider,
    get_realtime_service,
    get_service_cache,
    require_identity,
)

__all__ = [
    "get_connection_manager",
    "get_conversation_store",
    "get_current_identity",
    "get_identity_provider",
    "get_realtime_service",
    "get_service_cache",
    "require_identity",
]
