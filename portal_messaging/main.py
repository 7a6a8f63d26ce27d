"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, uvicorn, portal_messaging.api, portal_messaging.observability,
portal_messaging.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from portal_messaging.api.deps import get_service_cache
from portal_messaging.api.routers import (
    chat_router,
    create_realtime_router,
    health_router,
    support_router,
)
from portal_messaging.api.routers.router_utils import request_validation_exception_handler
from portal_messaging.boundary.db import dispose_engine
from portal_messaging.boundary.db.create_tables import bootstrap_database
from portal_messaging.configs import get_settings
from portal_messaging.core.connection_manager import ConnectionManager
from portal_messaging.observability.logger import configure_logging
from portal_messaging.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging, optionally bootstraps the schema on startup, and
    releases pooled database connections on shutdown.
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    # Startup
    if settings.bootstrap.create_tables_on_startup or settings.bootstrap.seed:
        logger.info("Bootstrapping database schema...")
        await bootstrap_database(seed=settings.bootstrap.seed)

    logger.info(
        "Messaging service started",
        extra={
            "environment": settings.environment,
            "chat_prefix": settings.api.chat_prefix,
            "websocket_path": settings.api.websocket_path,
        },
    )

    yield

    # Shutdown
    get_service_cache().clear()
    await dispose_engine()
    logger.info("Database connections released")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()

    app = FastAPI(
        title="Community Portal Messaging API",
        description="Chat sessions, support inbox, and realtime message broadcast",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # One registry of live WebSocket clients per application
    app.state.connection_manager = ConnectionManager()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

    app.include_router(health_router, prefix=settings.api.health_prefix)
    app.include_router(chat_router, prefix=settings.api.chat_prefix)
    app.include_router(support_router, prefix=settings.api.chat_prefix)
    app.include_router(create_realtime_router(settings.api.websocket_path))

    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "portal_messaging.main:app",
        host=settings.api.host,
        port=settings.api.port,
    )
