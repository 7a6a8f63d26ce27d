"""API routers."""

from .chat import router as chat_router
from .health import router as health_router
from .realtime import create_realtime_router
from .support import router as support_router

__all__ = [
    "chat_router",
    "create_realtime_router",
    "health_router",
    "support_router",
]
