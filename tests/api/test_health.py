"""
Tests for Health API Endpoints
"""

from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from harmonylearn.config import Settings
from harmonylearn.core.database import Database, get_database, get_db
from harmonylearn.main import app, create_app


@pytest.fixture
async def studio_client(database: Database, db_session: AsyncSession) -> AsyncClient:
    """Client for an app built from its own settings, with a 1kb body limit."""
    studio = create_app(
        Settings(
            _env_file=None,
            APP_NAME="Studio",
            APP_VERSION="2.3.4",
            ENVIRONMENT="test",
            BODY_LIMIT="1kb",
        )
    )

    async def override_get_db():
        yield db_session

    studio.dependency_overrides[get_db] = override_get_db
    studio.dependency_overrides[get_database] = lambda: database
    async with AsyncClient(transport=ASGITransport(app=studio), base_url="http://test") as ac:
        yield ac


async def chunked(total: int, size: int = 500) -> AsyncIterator[bytes]:
    """Stream ``total`` bytes without a Content-Length header."""
    for start in range(0, total, size):
        yield b"x" * min(size, total - start)


class TestServiceInfo:
    async def test_root(self, client: AsyncClient):
        response = await client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["service"] == "HarmonyLearn"
        assert data["status"] == "operational"

    async def test_root_reports_own_settings(self, studio_client: AsyncClient):
        response = await studio_client.get("/")

        assert response.json() == {
            "service": "Studio",
            "status": "operational",
            "version": "2.3.4",
            "environment": "test",
        }


class TestLiveness:
    async def test_health(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["uptime"] >= 0
        assert "timestamp" in data

    async def test_health_reports_own_settings(self, studio_client: AsyncClient):
        data = (await studio_client.get("/health")).json()

        assert data["version"] == "2.3.4"
        assert data["environment"] == "test"

    async def test_health_does_not_touch_database(self, client: AsyncClient):
        broken = Database("sqlite+aiosqlite:////nonexistent-dir/harmonylearn.db")
        app.dependency_overrides[get_database] = lambda: broken

        response = await client.get("/health")

        assert response.status_code == 200
        await broken.dispose()


class TestReadiness:
    async def test_ready_when_database_answers(self, client: AsyncClient):
        response = await client.get("/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready"}

    async def test_not_ready_when_database_unreachable(self, client: AsyncClient):
        broken = Database("sqlite+aiosqlite:////nonexistent-dir/harmonylearn.db")
        app.dependency_overrides[get_database] = lambda: broken

        response = await client.get("/ready")

        assert response.status_code == 503
        assert response.json() == {"status": "not ready"}
        await broken.dispose()


class TestRequestLimits:
    async def test_oversized_body_rejected(self, client: AsyncClient):
        body = "x" * (10 * 1024 * 1024 + 1)
        response = await client.post(
            "/api/posts", content=body, headers={"content-type": "application/json"}
        )

        assert response.status_code == 413
        assert response.json() == {"error": "Request body too large"}

    async def test_chunked_body_over_limit_rejected(self, studio_client: AsyncClient):
        response = await studio_client.post(
            "/api/posts", content=chunked(5000), headers={"content-type": "application/json"}
        )

        assert response.status_code == 413
        assert response.json() == {"error": "Request body too large"}

    async def test_small_chunked_body_passes(self, studio_client: AsyncClient):
        async def body() -> AsyncIterator[bytes]:
            yield b'{"email": '
            yield b'"ama@example.com"}'

        response = await studio_client.post(
            "/api/auth/login", content=body(), headers={"content-type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Email and password are required"}

    async def test_unknown_route(self, client: AsyncClient):
        response = await client.get("/api/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}
