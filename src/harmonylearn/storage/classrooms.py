"""
Classroom, Membership and Live Session Storage

Classrooms are the academies run by a master. Memberships grant users a
student or staff role inside one; live sessions are scheduled broadcasts
optionally tied to a classroom.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from harmonylearn.core.models import Classroom, ClassroomMembership, LiveSession, Schedule
from harmonylearn.core.schemas import (
    ClassroomAnalytics,
    ClassroomCreate,
    ClassroomMember,
    ClassroomUpdate,
    LiveSessionCreate,
    LiveSessionUpdate,
    MembershipCreate,
    MembershipUpdate,
    StaffClassroomInfo,
)
from harmonylearn.core.schemas.common import UserSummary
from harmonylearn.core.validation import validate_payload

from .base import apply_changes, changed_fields, commit, delete_row, fetch_all, fetch_one, require

logger = logging.getLogger(__name__)

RECENT_ACTIVITY_LIMIT = 10

CLASSROOM_LIST_OPTIONS = (
    selectinload(Classroom.master),
    selectinload(Classroom.memberships),
    selectinload(Classroom.live_sessions),
)

CLASSROOM_DETAIL_OPTIONS = (
    selectinload(Classroom.master),
    selectinload(Classroom.memberships).selectinload(ClassroomMembership.user),
    selectinload(Classroom.live_sessions).selectinload(LiveSession.mentor),
    selectinload(Classroom.schedules).selectinload(Schedule.instructor),
)

MEMBERSHIP_OPTIONS = (
    selectinload(ClassroomMembership.user),
    selectinload(ClassroomMembership.classroom),
)

LIVE_SESSION_OPTIONS = (selectinload(LiveSession.mentor), selectinload(LiveSession.classroom))


# ============================================================================
# Classrooms
# ============================================================================


async def list_classrooms(session: AsyncSession) -> list[Classroom]:
    """All classrooms, newest first, with member and session counts."""
    return await fetch_all(
        session,
        select(Classroom)
        .options(*CLASSROOM_LIST_OPTIONS)
        .order_by(Classroom.created_at.desc(), Classroom.id.desc()),
    )


async def get_classroom_by_id(session: AsyncSession, classroom_id: int) -> Classroom | None:
    """Classroom with members, live sessions and timetable."""
    return await fetch_one(
        session,
        select(Classroom).where(Classroom.id == classroom_id).options(*CLASSROOM_DETAIL_OPTIONS),
    )


async def get_classroom_by_slug(session: AsyncSession, slug: str) -> Classroom | None:
    """Public academy page lookup. Matches ``custom_slug`` exactly."""
    return await fetch_one(
        session,
        select(Classroom).where(Classroom.custom_slug == slug).options(*CLASSROOM_DETAIL_OPTIONS),
    )


async def create_classroom(
    session: AsyncSession, data: ClassroomCreate | Mapping[str, Any]
) -> Classroom:
    """
    Create a classroom.

    Raises:
        ValidationFailedError: Bad payload, slug or colour
        ConflictError: ``custom_slug`` already in use
    """
    classroom_data = validate_payload(ClassroomCreate, data)
    classroom = Classroom(**classroom_data.model_dump())
    session.add(classroom)
    await commit(session, "Classroom")

    logger.info(f"Created classroom {classroom.id} '{classroom.title}'")
    return require(await get_classroom_by_id(session, classroom.id), "Classroom", classroom.id)


async def update_classroom(
    session: AsyncSession, classroom_id: int, changes: ClassroomUpdate | Mapping[str, Any]
) -> Classroom:
    values = changed_fields(validate_payload(ClassroomUpdate, changes))
    classroom = require(await session.get(Classroom, classroom_id), "Classroom", classroom_id)
    apply_changes(classroom, values)
    await commit(session, "Classroom")

    return require(await get_classroom_by_id(session, classroom_id), "Classroom", classroom_id)


async def delete_classroom(session: AsyncSession, classroom_id: int) -> None:
    """Delete a classroom. Memberships and schedules go with it; live sessions are kept."""
    await delete_row(session, Classroom, classroom_id, "Classroom")


async def get_classroom_analytics(session: AsyncSession, classroom_id: int) -> ClassroomAnalytics:
    """
    Summary figures for a classroom dashboard.

    Counts active student and staff members, all live sessions, and averages
    ``attendee_count`` over completed sessions. ``recent_activity`` lists the
    latest joins.
    """
    require(await session.get(Classroom, classroom_id), "Classroom", classroom_id)

    role_counts = await session.execute(
        select(ClassroomMembership.role, func.count(ClassroomMembership.id))
        .where(
            ClassroomMembership.classroom_id == classroom_id,
            ClassroomMembership.status == "active",
        )
        .group_by(ClassroomMembership.role)
    )
    counts = {role: count for role, count in role_counts.all()}

    total_sessions = await session.scalar(
        select(func.count(LiveSession.id)).where(LiveSession.classroom_id == classroom_id)
    )
    average_attendance = await session.scalar(
        select(func.avg(LiveSession.attendee_count)).where(
            LiveSession.classroom_id == classroom_id, LiveSession.status == "completed"
        )
    )

    recent = await fetch_all(
        session,
        select(ClassroomMembership)
        .where(ClassroomMembership.classroom_id == classroom_id)
        .options(selectinload(ClassroomMembership.user))
        .order_by(ClassroomMembership.joined_at.desc(), ClassroomMembership.id.desc())
        .limit(RECENT_ACTIVITY_LIMIT),
    )

    return ClassroomAnalytics(
        total_students=counts.get("student", 0),
        total_staff=counts.get("staff", 0),
        total_sessions=total_sessions or 0,
        average_attendance=round(float(average_attendance or 0), 2),
        recent_activity=[ClassroomMember.model_validate(m) for m in recent],
    )


# ============================================================================
# Memberships
# ============================================================================


async def list_memberships(
    session: AsyncSession, classroom_id: int | None = None, role: str | None = None
) -> list[ClassroomMembership]:
    """Memberships, most recent join first, optionally filtered."""
    stmt = select(ClassroomMembership).options(*MEMBERSHIP_OPTIONS)
    if classroom_id is not None:
        stmt = stmt.where(ClassroomMembership.classroom_id == classroom_id)
    if role:
        stmt = stmt.where(ClassroomMembership.role == role)

    return await fetch_all(
        session,
        stmt.order_by(ClassroomMembership.joined_at.desc(), ClassroomMembership.id.desc()),
    )


async def get_membership_by_id(
    session: AsyncSession, membership_id: int
) -> ClassroomMembership | None:
    return await fetch_one(
        session,
        select(ClassroomMembership)
        .where(ClassroomMembership.id == membership_id)
        .options(*MEMBERSHIP_OPTIONS),
    )


async def create_membership(
    session: AsyncSession, data: MembershipCreate | Mapping[str, Any]
) -> ClassroomMembership:
    """Add a user to a classroom (role ``student`` unless given)."""
    membership_data = validate_payload(MembershipCreate, data)
    membership = ClassroomMembership(**membership_data.model_dump())
    session.add(membership)
    await commit(session, "Membership")

    logger.info(
        f"User {membership.user_id} joined classroom {membership.classroom_id} "
        f"as {membership.role}"
    )
    return require(await get_membership_by_id(session, membership.id), "Membership", membership.id)


async def update_membership(
    session: AsyncSession, membership_id: int, changes: MembershipUpdate | Mapping[str, Any]
) -> ClassroomMembership:
    values = changed_fields(validate_payload(MembershipUpdate, changes))
    membership = require(
        await session.get(ClassroomMembership, membership_id), "Membership", membership_id
    )
    apply_changes(membership, values)
    await commit(session, "Membership")

    return require(await get_membership_by_id(session, membership_id), "Membership", membership_id)


async def delete_membership(session: AsyncSession, membership_id: int) -> None:
    await delete_row(session, ClassroomMembership, membership_id, "Membership")


async def get_staff_classroom_info(
    session: AsyncSession, mentor_id: int
) -> StaffClassroomInfo | None:
    """The classroom where ``mentor_id`` holds an active staff membership, if any."""
    membership = await fetch_one(
        session,
        select(ClassroomMembership)
        .where(
            ClassroomMembership.user_id == mentor_id,
            ClassroomMembership.role == "staff",
            ClassroomMembership.status == "active",
        )
        .options(selectinload(ClassroomMembership.classroom).selectinload(Classroom.master))
        .order_by(ClassroomMembership.joined_at.desc())
        .limit(1),
    )
    if membership is None:
        return None

    classroom = membership.classroom
    return StaffClassroomInfo(
        classroom_id=classroom.id,
        classroom_title=classroom.title,
        academy_name=classroom.academy_name,
        master=UserSummary.model_validate(classroom.master) if classroom.master else None,
        joined_at=membership.joined_at,
        role=membership.role,
    )


# ============================================================================
# Live Sessions
# ============================================================================


async def list_live_sessions(
    session: AsyncSession, classroom_id: int | None = None, mentor_id: int | None = None
) -> list[LiveSession]:
    """Live sessions, latest scheduled first."""
    stmt = select(LiveSession).options(*LIVE_SESSION_OPTIONS)
    if classroom_id is not None:
        stmt = stmt.where(LiveSession.classroom_id == classroom_id)
    if mentor_id is not None:
        stmt = stmt.where(LiveSession.mentor_id == mentor_id)

    return await fetch_all(
        session, stmt.order_by(LiveSession.scheduled_at.desc(), LiveSession.id.desc())
    )


async def get_live_session_by_id(session: AsyncSession, live_session_id: int) -> LiveSession | None:
    return await fetch_one(
        session,
        select(LiveSession).where(LiveSession.id == live_session_id).options(*LIVE_SESSION_OPTIONS),
    )


async def create_live_session(
    session: AsyncSession, data: LiveSessionCreate | Mapping[str, Any]
) -> LiveSession:
    session_data = validate_payload(LiveSessionCreate, data)
    live_session = LiveSession(**session_data.model_dump())
    session.add(live_session)
    await commit(session, "Live session")

    return require(
        await get_live_session_by_id(session, live_session.id), "Live session", live_session.id
    )


async def update_live_session(
    session: AsyncSession, live_session_id: int, changes: LiveSessionUpdate | Mapping[str, Any]
) -> LiveSession:
    values = changed_fields(validate_payload(LiveSessionUpdate, changes))
    live_session = require(
        await session.get(LiveSession, live_session_id), "Live session", live_session_id
    )
    apply_changes(live_session, values)
    await commit(session, "Live session")

    return require(
        await get_live_session_by_id(session, live_session_id), "Live session", live_session_id
    )


async def delete_live_session(session: AsyncSession, live_session_id: int) -> None:
    await delete_row(session, LiveSession, live_session_id, "Live session")
