"""
Pytest Configuration and Fixtures

Shared fixtures for unit and API tests. Each test gets a fresh in-memory
SQLite database unless TEST_DATABASE_URL points somewhere else.
"""

import os
from datetime import UTC, datetime, timedelta

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import configure_mappers

from harmonylearn.core.database import Database, get_database, get_db
from harmonylearn.core.models import (
    Classroom,
    ClassroomMembership,
    Course,
    MentorshipRequest,
    User,
)
from harmonylearn.core.security import hash_password
from harmonylearn.main import app

# Ensure all mappers are configured
configure_mappers()

TEST_PASSWORD = "secret123"


@pytest.fixture
async def database():
    """Fresh database with all tables created."""
    url = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    db = Database(url, pool_size=2)

    await db.drop_all()
    await db.create_all()

    yield db

    await db.drop_all()
    await db.dispose()


@pytest.fixture
async def db_session(database: Database) -> AsyncSession:
    """Create database session for testing."""
    async with database.session() as session:
        yield session


@pytest.fixture
async def client(database: Database, db_session: AsyncSession) -> AsyncClient:
    """Create test client with database dependency overrides."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_database] = lambda: database
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


async def _make_user(session: AsyncSession, username: str, role: str, **extra) -> User:
    user = User(
        username=username,
        email=f"{username}@example.com",
        password=hash_password(TEST_PASSWORD),
        role=role,
        first_name=username.capitalize(),
        **extra,
    )
    session.add(user)
    await session.commit()
    return user


@pytest.fixture
async def student(db_session: AsyncSession) -> User:
    """Create a test student."""
    return await _make_user(db_session, "ama", "student")


@pytest.fixture
async def mentor(db_session: AsyncSession) -> User:
    """Create a test mentor."""
    return await _make_user(db_session, "kofi", "mentor")


@pytest.fixture
async def master(db_session: AsyncSession) -> User:
    """Create a classroom owner."""
    return await _make_user(db_session, "yaa", "master", is_master=True)


@pytest.fixture
async def classroom(db_session: AsyncSession, master: User) -> Classroom:
    """Create a public academy owned by ``master``."""
    classroom = Classroom(
        title="Piano Foundations",
        subject="Piano",
        level="Beginner",
        master_id=master.id,
        academy_name="Accra Piano Academy",
        custom_slug="accra-piano",
    )
    db_session.add(classroom)
    await db_session.commit()
    return classroom


@pytest.fixture
async def course(db_session: AsyncSession, mentor: User) -> Course:
    """Create a course taught by ``mentor``."""
    course = Course(
        title="Guitar Basics",
        category="Guitar",
        level="Beginner",
        mentor_id=mentor.id,
    )
    db_session.add(course)
    await db_session.commit()
    return course


@pytest.fixture
async def staff_membership(
    db_session: AsyncSession, mentor: User, classroom: Classroom
) -> ClassroomMembership:
    """``mentor`` works as active staff in ``classroom``."""
    membership = ClassroomMembership(
        user_id=mentor.id, classroom_id=classroom.id, role="staff", status="active"
    )
    db_session.add(membership)
    await db_session.commit()
    return membership


@pytest.fixture
async def mentorship_request(
    db_session: AsyncSession, student: User, mentor: User
) -> MentorshipRequest:
    request = MentorshipRequest(
        student_id=student.id,
        mentor_id=mentor.id,
        subject="Jazz voicings",
        status="pending",
    )
    db_session.add(request)
    await db_session.commit()
    return request


@pytest.fixture
def next_week() -> datetime:
    return datetime.now(UTC) + timedelta(days=7)
