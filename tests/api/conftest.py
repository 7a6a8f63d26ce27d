"""
Fixtures for API tests.

The full application is built with create_app() and its store dependency
overridden, so no database is touched. The client runs inside the app
lifespan so HTTP requests and every WebSocket session share one event loop.
"""

import pytest
from fastapi.testclient import TestClient

from portal_messaging.api.deps import get_conversation_store
from portal_messaging.main import create_app


@pytest.fixture
def app(memory_store):
    app = create_app()
    app.dependency_overrides[get_conversation_store] = lambda: memory_store
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client
