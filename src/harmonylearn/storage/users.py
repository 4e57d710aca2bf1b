"""
User and Mentor Profile Storage
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import Select, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from harmonylearn.core.errors import ConflictError
from harmonylearn.core.models import Enrollment, MentorProfile, User
from harmonylearn.core.schemas import (
    MentorProfileCreate,
    MentorProfileUpdate,
    UserCreate,
    UserUpdate,
)
from harmonylearn.core.security import hash_password
from harmonylearn.core.validation import validate_payload

from .base import apply_changes, changed_fields, commit, delete_row, fetch_all, fetch_one, require

logger = logging.getLogger(__name__)

USER_DETAIL_OPTIONS = (
    selectinload(User.mentor_profiles),
    selectinload(User.courses),
    selectinload(User.enrollments).selectinload(Enrollment.course),
)


# ============================================================================
# Users
# ============================================================================


async def list_users(session: AsyncSession) -> list[User]:
    """All users, newest first."""
    return await fetch_all(session, select(User).order_by(User.created_at.desc(), User.id.desc()))


async def get_user_by_id(session: AsyncSession, user_id: int) -> User | None:
    """User with mentor profiles, authored courses and enrollments."""
    return await fetch_one(
        session, select(User).where(User.id == user_id).options(*USER_DETAIL_OPTIONS)
    )


async def get_user_by_username(session: AsyncSession, username: str) -> User | None:
    return await fetch_one(session, select(User).where(User.username == username))


async def get_user_by_email(session: AsyncSession, email: str) -> User | None:
    return await fetch_one(session, select(User).where(User.email == email))


async def create_user(session: AsyncSession, data: UserCreate | Mapping[str, Any]) -> User:
    """
    Create a user account.

    The plaintext password is hashed before it is stored.

    Raises:
        ValidationFailedError: Payload does not match UserCreate
        ConflictError: Username or email already taken
    """
    user_data = validate_payload(UserCreate, data)

    result = await session.execute(
        select(User).where(
            or_(User.email == user_data.email, User.username == user_data.username)
        )
    )
    existing = result.scalars().first()
    if existing:
        field = "email" if existing.email == user_data.email else "username"
        raise ConflictError(f"User already exists with this {field}")

    values = user_data.model_dump(exclude={"password"})
    user = User(**values, password=hash_password(user_data.password))
    session.add(user)
    await commit(session, "User")

    logger.info(f"Created user {user.id} ({user.role})")
    return require(await get_user_by_id(session, user.id), "User", user.id)


async def update_user(
    session: AsyncSession, user_id: int, changes: UserUpdate | Mapping[str, Any]
) -> User:
    """Apply a partial update; a new password is re-hashed."""
    values = changed_fields(validate_payload(UserUpdate, changes))
    user = require(await session.get(User, user_id), "User", user_id)

    if values.get("password"):
        values["password"] = hash_password(values["password"])
    apply_changes(user, values)
    await commit(session, "User")

    return require(await get_user_by_id(session, user_id), "User", user_id)


async def delete_user(session: AsyncSession, user_id: int) -> None:
    await delete_row(session, User, user_id, "User")


# ============================================================================
# Mentor Profiles
# ============================================================================


def _profile_query() -> Select[tuple[MentorProfile]]:
    return select(MentorProfile).options(selectinload(MentorProfile.user))


async def list_mentor_profiles(session: AsyncSession) -> list[MentorProfile]:
    """All mentor profiles, best rated first."""
    return await fetch_all(
        session,
        _profile_query().order_by(MentorProfile.average_rating.desc(), MentorProfile.id),
    )


async def get_mentor_profile_by_id(session: AsyncSession, profile_id: int) -> MentorProfile | None:
    return await fetch_one(session, _profile_query().where(MentorProfile.id == profile_id))


async def get_mentor_profile_by_user_id(
    session: AsyncSession, user_id: int
) -> MentorProfile | None:
    return await fetch_one(
        session,
        _profile_query().where(MentorProfile.user_id == user_id).order_by(MentorProfile.id).limit(1),
    )


async def create_mentor_profile(
    session: AsyncSession, data: MentorProfileCreate | Mapping[str, Any]
) -> MentorProfile:
    profile_data = validate_payload(MentorProfileCreate, data)
    profile = MentorProfile(**profile_data.model_dump())
    session.add(profile)
    await commit(session, "Mentor profile")

    return require(await get_mentor_profile_by_id(session, profile.id), "Mentor profile", profile.id)


async def update_mentor_profile(
    session: AsyncSession, profile_id: int, changes: MentorProfileUpdate | Mapping[str, Any]
) -> MentorProfile:
    values = changed_fields(validate_payload(MentorProfileUpdate, changes))
    profile = require(await session.get(MentorProfile, profile_id), "Mentor profile", profile_id)
    apply_changes(profile, values)
    await commit(session, "Mentor profile")

    return require(await get_mentor_profile_by_id(session, profile_id), "Mentor profile", profile_id)


async def delete_mentor_profile(session: AsyncSession, profile_id: int) -> None:
    await delete_row(session, MentorProfile, profile_id, "Mentor profile")
