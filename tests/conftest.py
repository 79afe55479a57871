# tests/conftest.py
"""
Shared fixtures.

Every test gets a fresh application backed by an in-memory SQLite database.
Logging in goes through the real ``/auth/google/callback`` route; only
Google's token exchange is replaced.
"""
import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.database import build_engine, build_sessionmaker, create_tables
from app.main import create_app

ALICE = {
    "sub": "google-alice",
    "email": "alice@gmail.com",
    "name": "Alice Liddell",
    "given_name": "Alice",
    "family_name": "Liddell",
    "picture": "https://lh3.googleusercontent.com/a/alice",
}

BOB = {
    "sub": "google-bob",
    "email": "bob@gmail.com",
    "name": "Bob Builder",
}


@pytest.fixture
def settings() -> Settings:
    return Settings(
        GOOGLE_CLIENT_ID="test-client-id",
        GOOGLE_CLIENT_SECRET="test-client-secret",
        SESSION_SECRET="test-session-secret",
        DATABASE_URL="sqlite+aiosqlite://",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def login(app, client, monkeypatch):
    """Log ``client`` in as the given Google userinfo; returns the callback response."""
    google = app.state.oauth.google

    def _login(userinfo):
        async def fake_authorize_access_token(request, **kwargs):
            return {"access_token": "fake-access-token", "userinfo": userinfo}

        monkeypatch.setattr(google, "authorize_access_token", fake_authorize_access_token)
        resp = client.get("/auth/google/callback", follow_redirects=False)
        assert resp.status_code == 302
        return resp

    return _login


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def db(anyio_backend, settings):
    engine = build_engine(settings)
    await create_tables(engine)
    async_session = build_sessionmaker(engine)
    async with async_session() as session:
        yield session
    await engine.dispose()
