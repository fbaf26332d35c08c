"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("ENVIRONMENT", "development")

import pytest
from collections.abc import AsyncGenerator
from httpx import ASGITransport, AsyncClient

from grindlog.db.base import Base
from grindlog.db.session import Database
from grindlog.main import app

PASSWORD = "hunter22"


@pytest.fixture
async def database(tmp_path) -> AsyncGenerator[Database, None]:
    """A fresh SQLite store per test, installed on the app like the lifespan does."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'grindlog.db'}")
    async with db.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    app.state.database = db
    yield db
    await db.dispose()


@pytest.fixture
async def client(database: Database) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for testing FastAPI endpoints."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


async def sign_up_and_in(client: AsyncClient, email: str) -> dict[str, str]:
    """Create an account and return a Bearer header for it."""
    response = await client.post("/auth/signup", json={"email": email, "password": PASSWORD})
    assert response.status_code == 201, response.text
    response = await client.post("/auth/signin", json={"email": email, "password": PASSWORD})
    assert response.status_code == 200, response.text
    # Tests authenticate by header; drop the cookie so users don't bleed into each other
    client.cookies.clear()
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
async def auth_headers(client: AsyncClient) -> dict[str, str]:
    return await sign_up_and_in(client, "alice@example.com")


@pytest.fixture
async def other_auth_headers(client: AsyncClient) -> dict[str, str]:
    return await sign_up_and_in(client, "bob@example.com")
