"""Shared fixtures: a throwaway SQLite database and an API client."""

import asyncio
import os
import tempfile

import pytest

_db_dir = tempfile.mkdtemp(prefix="flowplanr-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_db_dir}/test.db"

from fastapi.testclient import TestClient  # noqa: E402

from flowplanr.database import Base, engine  # noqa: E402
from flowplanr.main import app  # noqa: E402


async def _reset_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture
def client():
    """API client backed by an empty database."""
    asyncio.run(_reset_db())
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(client):
    """Register a user and return its bearer headers."""
    resp = client.post(
        "/auth/register",
        json={"name": "Alice", "email": "alice@flowplanr.io", "password": "secret"},
    )
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}
