# tests/conftest.py
import os

import pytest
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

# settings are read from the environment; make sure the required secret exists
# before anything builds them
os.environ.setdefault("ACCESS_TOKEN_SECRET", "test-secret")
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")

from worktales.core.config import get_settings
from worktales.core.security import TOKEN_COOKIE, create_access_token
from worktales.db.mongo import MongoStore
from worktales.main import create_app


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def store():
    """In-memory Motor-compatible database, empty for every test."""
    return MongoStore(AsyncMongoMockClient(), "workTalesDB")


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def login(client):
    """Put a signed token for ``email`` in the client's cookie jar."""
    def _login(email: str) -> str:
        token = create_access_token({"email": email})
        client.cookies.set(TOKEN_COOKIE, token)
        return token
    return _login
