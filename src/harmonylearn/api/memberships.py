"""
Classroom Membership API Endpoints
"""
# ruff: noqa: B008 - FastAPI Depends in function defaults is standard pattern

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from harmonylearn import storage
from harmonylearn.core.database import get_db
from harmonylearn.core.models import ClassroomMembership
from harmonylearn.core.schemas import (
    MembershipCreate,
    MembershipSchema,
    MembershipUpdate,
    MessageResponse,
)

router = APIRouter()


@router.get("", response_model=list[MembershipSchema])
async def list_memberships(
    classroom_id: int | None = Query(None, alias="classroomId"),
    role: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
) -> list[ClassroomMembership]:
    return await storage.list_memberships(db, classroom_id=classroom_id, role=role)


@router.post("", response_model=MembershipSchema, status_code=status.HTTP_201_CREATED)
async def create_membership(
    membership_data: MembershipCreate, db: AsyncSession = Depends(get_db)
) -> ClassroomMembership:
    """Add a user to a classroom; role defaults to student."""
    return await storage.create_membership(db, membership_data)


@router.patch("/{membership_id}", response_model=MembershipSchema)
async def update_membership(
    membership_id: int, membership_data: MembershipUpdate, db: AsyncSession = Depends(get_db)
) -> ClassroomMembership:
    return await storage.update_membership(db, membership_id, membership_data)


@router.delete("/{membership_id}", response_model=MessageResponse)
async def delete_membership(
    membership_id: int, db: AsyncSession = Depends(get_db)
) -> MessageResponse:
    await storage.delete_membership(db, membership_id)
    return MessageResponse(message="Membership deleted successfully")
