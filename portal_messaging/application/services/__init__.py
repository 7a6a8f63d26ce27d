"""Service orchestrators."""

from .conversation_store import ConversationStore, SqlConversationStore
from .realtime_service import RealtimeService

__all__ = [
    "ConversationStore",
    "RealtimeService",
    "SqlConversationStore",
]
