"""
Workflow Request Storage

Staff, master-role, mentorship and resignation requests. Status updates
stamp their review timestamps, and approvals apply their effect on
memberships or roles inside the same transaction as the status change.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from harmonylearn.core.models import (
    ClassroomMembership,
    MasterRoleRequest,
    MentorConversation,
    MentorshipRequest,
    ResignationRequest,
    StaffRequest,
    User,
)
from harmonylearn.core.models.base import utcnow
from harmonylearn.core.schemas import (
    MasterRoleRequestCreate,
    MasterRoleRequestStatusUpdate,
    MentorshipRequestCreate,
    MentorshipRequestUpdate,
    ResignationRequestCreate,
    ResignationRequestStatusUpdate,
    StaffRequestCreate,
    StaffRequestStatusUpdate,
)
from harmonylearn.core.validation import validate_payload

from .base import apply_changes, changed_fields, commit, delete_row, fetch_all, fetch_one, require

logger = logging.getLogger(__name__)

STAFF_REQUEST_OPTIONS = (
    selectinload(StaffRequest.mentor),
    selectinload(StaffRequest.classroom),
    selectinload(StaffRequest.reviewer),
)

MASTER_ROLE_REQUEST_OPTIONS = (
    selectinload(MasterRoleRequest.mentor),
    selectinload(MasterRoleRequest.reviewer),
)

MENTORSHIP_REQUEST_OPTIONS = (
    selectinload(MentorshipRequest.student),
    selectinload(MentorshipRequest.mentor),
)

MENTORSHIP_REQUEST_DETAIL_OPTIONS = (
    *MENTORSHIP_REQUEST_OPTIONS,
    selectinload(MentorshipRequest.conversations).selectinload(MentorConversation.sender),
    selectinload(MentorshipRequest.sessions),
)

RESIGNATION_REQUEST_OPTIONS = (
    selectinload(ResignationRequest.mentor),
    selectinload(ResignationRequest.classroom),
    selectinload(ResignationRequest.reviewer),
)


def _is_approval(values: dict[str, Any], current_status: str) -> bool:
    return values.get("status") == "approved" and current_status != "approved"


async def _find_membership(
    session: AsyncSession, user_id: int, classroom_id: int
) -> ClassroomMembership | None:
    result = await session.execute(
        select(ClassroomMembership).where(
            ClassroomMembership.user_id == user_id,
            ClassroomMembership.classroom_id == classroom_id,
        )
    )
    return result.scalar_one_or_none()


# ============================================================================
# Staff Requests
# ============================================================================


async def list_staff_requests(
    session: AsyncSession, classroom_id: int | None = None, status: str | None = None
) -> list[StaffRequest]:
    stmt = select(StaffRequest).options(*STAFF_REQUEST_OPTIONS)
    if classroom_id is not None:
        stmt = stmt.where(StaffRequest.classroom_id == classroom_id)
    if status:
        stmt = stmt.where(StaffRequest.status == status)

    return await fetch_all(
        session, stmt.order_by(StaffRequest.created_at.desc(), StaffRequest.id.desc())
    )


async def get_staff_request_by_id(session: AsyncSession, request_id: int) -> StaffRequest | None:
    return await fetch_one(
        session,
        select(StaffRequest).where(StaffRequest.id == request_id).options(*STAFF_REQUEST_OPTIONS),
    )


async def create_staff_request(
    session: AsyncSession, data: StaffRequestCreate | Mapping[str, Any]
) -> StaffRequest:
    request_data = validate_payload(StaffRequestCreate, data)
    request = StaffRequest(**request_data.model_dump(), status="pending")
    session.add(request)
    await commit(session, "Staff request")

    logger.info(f"Mentor {request.mentor_id} requested staff role in classroom {request.classroom_id}")
    return require(await get_staff_request_by_id(session, request.id), "Staff request", request.id)


async def update_staff_request(
    session: AsyncSession,
    request_id: int,
    changes: StaffRequestStatusUpdate | Mapping[str, Any],
) -> StaffRequest:
    """
    Review a staff request.

    A reviewer stamps ``reviewed_at``. Approval gives the mentor an active
    staff membership in the classroom, creating or reactivating it.
    """
    values = changed_fields(validate_payload(StaffRequestStatusUpdate, changes))
    request = require(await session.get(StaffRequest, request_id), "Staff request", request_id)

    if values.get("reviewed_by") is not None:
        values["reviewed_at"] = utcnow()

    if _is_approval(values, request.status):
        membership = await _find_membership(session, request.mentor_id, request.classroom_id)
        if membership is None:
            session.add(
                ClassroomMembership(
                    user_id=request.mentor_id,
                    classroom_id=request.classroom_id,
                    role="staff",
                    status="active",
                )
            )
        else:
            membership.role = "staff"
            membership.status = "active"

    apply_changes(request, values)
    await commit(session, "Staff request")

    logger.info(f"Staff request {request_id} is now {request.status}")
    return require(await get_staff_request_by_id(session, request_id), "Staff request", request_id)


async def delete_staff_request(session: AsyncSession, request_id: int) -> None:
    await delete_row(session, StaffRequest, request_id, "Staff request")


# ============================================================================
# Master Role Requests
# ============================================================================


async def list_master_role_requests(
    session: AsyncSession, status: str | None = None
) -> list[MasterRoleRequest]:
    stmt = select(MasterRoleRequest).options(*MASTER_ROLE_REQUEST_OPTIONS)
    if status:
        stmt = stmt.where(MasterRoleRequest.status == status)

    return await fetch_all(
        session, stmt.order_by(MasterRoleRequest.created_at.desc(), MasterRoleRequest.id.desc())
    )


async def get_master_role_request_by_id(
    session: AsyncSession, request_id: int
) -> MasterRoleRequest | None:
    return await fetch_one(
        session,
        select(MasterRoleRequest)
        .where(MasterRoleRequest.id == request_id)
        .options(*MASTER_ROLE_REQUEST_OPTIONS),
    )


async def create_master_role_request(
    session: AsyncSession, data: MasterRoleRequestCreate | Mapping[str, Any]
) -> MasterRoleRequest:
    """
    File a master-role application.

    Raises:
        ValidationFailedError: Missing experience/qualifications/motivation, or
            fields that belong to a different request type
    """
    request_data = validate_payload(MasterRoleRequestCreate, data)
    request = MasterRoleRequest(**request_data.model_dump(), status="pending")
    session.add(request)
    await commit(session, "Master role request")

    logger.info(f"Mentor {request.mentor_id} applied for the master role")
    return require(
        await get_master_role_request_by_id(session, request.id), "Master role request", request.id
    )


async def update_master_role_request(
    session: AsyncSession,
    request_id: int,
    changes: MasterRoleRequestStatusUpdate | Mapping[str, Any],
) -> MasterRoleRequest:
    """
    Review a master-role application.

    ``approved`` stamps ``approved_at`` and promotes the mentor to master;
    ``rejected`` stamps ``rejected_at``; a reviewer stamps ``reviewed_at``.
    """
    values = changed_fields(validate_payload(MasterRoleRequestStatusUpdate, changes))
    request = require(
        await session.get(MasterRoleRequest, request_id), "Master role request", request_id
    )

    now = utcnow()
    if values.get("status") == "approved":
        values["approved_at"] = now
    elif values.get("status") == "rejected":
        values["rejected_at"] = now
    if values.get("reviewed_by") is not None:
        values["reviewed_at"] = now

    if _is_approval(values, request.status):
        mentor = require(await session.get(User, request.mentor_id), "User", request.mentor_id)
        mentor.is_master = True
        mentor.role = "master"

    apply_changes(request, values)
    await commit(session, "Master role request")

    logger.info(f"Master role request {request_id} is now {request.status}")
    return require(
        await get_master_role_request_by_id(session, request_id), "Master role request", request_id
    )


async def delete_master_role_request(session: AsyncSession, request_id: int) -> None:
    await delete_row(session, MasterRoleRequest, request_id, "Master role request")


# ============================================================================
# Mentorship Requests
# ============================================================================


async def list_mentorship_requests(
    session: AsyncSession,
    student_id: int | None = None,
    mentor_id: int | None = None,
    status: str | None = None,
) -> list[MentorshipRequest]:
    stmt = select(MentorshipRequest).options(*MENTORSHIP_REQUEST_OPTIONS)
    if student_id is not None:
        stmt = stmt.where(MentorshipRequest.student_id == student_id)
    if mentor_id is not None:
        stmt = stmt.where(MentorshipRequest.mentor_id == mentor_id)
    if status:
        stmt = stmt.where(MentorshipRequest.status == status)

    return await fetch_all(
        session, stmt.order_by(MentorshipRequest.created_at.desc(), MentorshipRequest.id.desc())
    )


async def get_mentorship_request_by_id(
    session: AsyncSession, request_id: int
) -> MentorshipRequest | None:
    """Request with its conversation thread and booked sessions."""
    return await fetch_one(
        session,
        select(MentorshipRequest)
        .where(MentorshipRequest.id == request_id)
        .options(*MENTORSHIP_REQUEST_DETAIL_OPTIONS),
    )


async def create_mentorship_request(
    session: AsyncSession, data: MentorshipRequestCreate | Mapping[str, Any]
) -> MentorshipRequest:
    request_data = validate_payload(MentorshipRequestCreate, data)
    request = MentorshipRequest(**request_data.model_dump(), status="pending")
    session.add(request)
    await commit(session, "Mentorship request")

    logger.info(f"Student {request.student_id} asked mentor {request.mentor_id} for mentorship")
    return require(
        await get_mentorship_request_by_id(session, request.id), "Mentorship request", request.id
    )


async def update_mentorship_request(
    session: AsyncSession,
    request_id: int,
    changes: MentorshipRequestUpdate | Mapping[str, Any],
) -> MentorshipRequest:
    """Mentor's answer. A status change stamps ``responded_at``."""
    values = changed_fields(validate_payload(MentorshipRequestUpdate, changes))
    request = require(
        await session.get(MentorshipRequest, request_id), "Mentorship request", request_id
    )

    if values.get("status") and values["status"] != request.status:
        values["responded_at"] = utcnow()

    apply_changes(request, values)
    await commit(session, "Mentorship request")

    return require(
        await get_mentorship_request_by_id(session, request_id), "Mentorship request", request_id
    )


async def delete_mentorship_request(session: AsyncSession, request_id: int) -> None:
    await delete_row(session, MentorshipRequest, request_id, "Mentorship request")


# ============================================================================
# Resignation Requests
# ============================================================================


async def list_resignation_requests(
    session: AsyncSession,
    classroom_id: int | None = None,
    mentor_id: int | None = None,
    status: str | None = None,
) -> list[ResignationRequest]:
    stmt = select(ResignationRequest).options(*RESIGNATION_REQUEST_OPTIONS)
    if classroom_id is not None:
        stmt = stmt.where(ResignationRequest.classroom_id == classroom_id)
    if mentor_id is not None:
        stmt = stmt.where(ResignationRequest.mentor_id == mentor_id)
    if status:
        stmt = stmt.where(ResignationRequest.status == status)

    return await fetch_all(
        session, stmt.order_by(ResignationRequest.created_at.desc(), ResignationRequest.id.desc())
    )


async def get_resignation_request_by_id(
    session: AsyncSession, request_id: int
) -> ResignationRequest | None:
    return await fetch_one(
        session,
        select(ResignationRequest)
        .where(ResignationRequest.id == request_id)
        .options(*RESIGNATION_REQUEST_OPTIONS),
    )


async def create_resignation_request(
    session: AsyncSession, data: ResignationRequestCreate | Mapping[str, Any]
) -> ResignationRequest:
    request_data = validate_payload(ResignationRequestCreate, data)
    request = ResignationRequest(**request_data.model_dump(), status="pending")
    session.add(request)
    await commit(session, "Resignation request")

    logger.info(f"Mentor {request.mentor_id} filed resignation from classroom {request.classroom_id}")
    return require(
        await get_resignation_request_by_id(session, request.id), "Resignation request", request.id
    )


async def update_resignation_request(
    session: AsyncSession,
    request_id: int,
    changes: ResignationRequestStatusUpdate | Mapping[str, Any],
) -> ResignationRequest:
    """
    Master's decision on a resignation.

    A reviewer stamps ``reviewed_at``. Approval deactivates the mentor's
    staff membership in the classroom.
    """
    values = changed_fields(validate_payload(ResignationRequestStatusUpdate, changes))
    request = require(
        await session.get(ResignationRequest, request_id), "Resignation request", request_id
    )

    if values.get("reviewed_by") is not None:
        values["reviewed_at"] = utcnow()

    if _is_approval(values, request.status):
        membership = await _find_membership(session, request.mentor_id, request.classroom_id)
        if membership is not None and membership.role == "staff":
            membership.status = "inactive"

    apply_changes(request, values)
    await commit(session, "Resignation request")

    logger.info(f"Resignation request {request_id} is now {request.status}")
    return require(
        await get_resignation_request_by_id(session, request_id), "Resignation request", request_id
    )
