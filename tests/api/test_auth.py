"""
Tests for Authentication API Endpoints
"""

from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from harmonylearn.core.models import User

TEST_PASSWORD = "secret123"


class TestRegister:
    async def test_register_success(self, client: AsyncClient):
        response = await client.post(
            "/api/auth/register",
            json={
                "username": "abena",
                "email": "abena@example.com",
                "password": "secret123",
                "firstName": "Abena",
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "User registered successfully"
        assert data["user"]["username"] == "abena"
        assert data["user"]["firstName"] == "Abena"
        assert data["user"]["role"] == "student"
        assert "password" not in data["user"]

    async def test_register_duplicate_email(
        self, client: AsyncClient, db_session: AsyncSession, student: User
    ):
        response = await client.post(
            "/api/auth/register",
            json={"username": "other", "email": student.email, "password": "secret123"},
        )

        assert response.status_code == 409
        assert response.json()["error"] == "User already exists with this email"
        assert await db_session.scalar(select(func.count(User.id))) == 1

    async def test_register_invalid_payload(self, client: AsyncClient):
        response = await client.post(
            "/api/auth/register",
            json={"username": "x", "email": "not-an-email", "password": "1"},
        )

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "Invalid request data"
        assert data["kind"] == "validation_failed"
        assert len(data["details"]) == 3


class TestLogin:
    async def test_login_success(self, client: AsyncClient, student: User):
        response = await client.post(
            "/api/auth/login", json={"email": student.email, "password": TEST_PASSWORD}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Login successful"
        assert data["user"]["id"] == student.id
        assert "token" not in data

    async def test_login_wrong_password(self, client: AsyncClient, student: User):
        response = await client.post(
            "/api/auth/login", json={"email": student.email, "password": "wrong-one"}
        )

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid credentials"}

    async def test_login_unknown_email(self, client: AsyncClient):
        response = await client.post(
            "/api/auth/login", json={"email": "ghost@example.com", "password": TEST_PASSWORD}
        )

        assert response.status_code == 401

    async def test_login_missing_fields(self, client: AsyncClient):
        response = await client.post("/api/auth/login", json={"email": "ama@example.com"})

        assert response.status_code == 400
        assert response.json() == {"error": "Email and password are required"}

    async def test_login_with_address_as_registered(self, client: AsyncClient):
        registered = await client.post(
            "/api/auth/register",
            json={"username": "kwame", "email": "Kwame@Example.COM", "password": TEST_PASSWORD},
        )
        assert registered.json()["user"]["email"] == "Kwame@example.com"

        response = await client.post(
            "/api/auth/login", json={"email": "Kwame@Example.COM", "password": TEST_PASSWORD}
        )

        assert response.status_code == 200
        assert response.json()["user"]["username"] == "kwame"
