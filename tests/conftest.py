"""Test fixtures — a fresh app and in-memory database per test.

Learn: Testing pattern for async SQLAlchemy + FastAPI:

1. Each test builds its own app via create_app(settings) with an
   in-memory SQLite database (aiosqlite). StaticPool keeps one shared
   connection, so the schema created here is what the request sessions see.
2. Tables come straight from Base.metadata, no migrations.
3. bcrypt runs at the minimum cost (4 rounds) to keep tests fast.

Nothing is shared between tests, so there is no cleanup or rollback dance.
"""

import uuid

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from authapi.config import Settings
from authapi.db.models import Base
from authapi.main import create_app

TEST_JWT_SECRET = "test-secret-0123456789abcdef0123456789abcdef"


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        jwt_secret=TEST_JWT_SECRET,
        database_url="sqlite+aiosqlite:///:memory:",
        bcrypt_rounds=4,
        environment="development",
    )


@pytest_asyncio.fixture()
async def app(settings):
    app = create_app(settings)
    async with app.state.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield app
    finally:
        await app.state.engine.dispose()


@pytest_asyncio.fixture()
async def client(app):
    """HTTP client talking to the app in-process. Keeps cookies between calls."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture()
async def db_session(app):
    """Session on the same database the app uses."""
    async with app.state.session_factory() as session:
        yield session


@pytest.fixture()
def new_email():
    """Factory for unique email addresses."""
    def _make(prefix: str = "user") -> str:
        return f"{prefix}-{uuid.uuid4().hex[:8]}@example.com"
    return _make
