"""
Classroom API Endpoints

Academies run by masters: public slug lookup, member roster and dashboard
analytics.
"""
# ruff: noqa: B008 - FastAPI Depends in function defaults is standard pattern

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from harmonylearn import storage
from harmonylearn.core.database import get_db
from harmonylearn.core.errors import NotFoundError
from harmonylearn.core.models import Classroom, ClassroomMembership
from harmonylearn.core.schemas import (
    ClassroomAnalytics,
    ClassroomCreate,
    ClassroomDetail,
    ClassroomSchema,
    ClassroomUpdate,
    MembershipSchema,
    MessageResponse,
)

router = APIRouter()


@router.get("", response_model=list[ClassroomSchema])
async def list_classrooms(db: AsyncSession = Depends(get_db)) -> list[Classroom]:
    return await storage.list_classrooms(db)


@router.get("/slug/{slug}", response_model=ClassroomDetail)
async def get_classroom_by_slug(slug: str, db: AsyncSession = Depends(get_db)) -> Classroom:
    """Public academy page."""
    classroom = await storage.get_classroom_by_slug(db, slug)
    if not classroom:
        raise NotFoundError("Academy", slug)
    return classroom


@router.get("/{classroom_id}", response_model=ClassroomDetail)
async def get_classroom(classroom_id: int, db: AsyncSession = Depends(get_db)) -> Classroom:
    classroom = await storage.get_classroom_by_id(db, classroom_id)
    if not classroom:
        raise NotFoundError("Classroom", classroom_id)
    return classroom


@router.post("", response_model=ClassroomDetail, status_code=status.HTTP_201_CREATED)
async def create_classroom(
    classroom_data: ClassroomCreate, db: AsyncSession = Depends(get_db)
) -> Classroom:
    return await storage.create_classroom(db, classroom_data)


@router.patch("/{classroom_id}", response_model=ClassroomDetail)
async def update_classroom(
    classroom_id: int, classroom_data: ClassroomUpdate, db: AsyncSession = Depends(get_db)
) -> Classroom:
    return await storage.update_classroom(db, classroom_id, classroom_data)


@router.delete("/{classroom_id}", response_model=MessageResponse)
async def delete_classroom(
    classroom_id: int, db: AsyncSession = Depends(get_db)
) -> MessageResponse:
    await storage.delete_classroom(db, classroom_id)
    return MessageResponse(message="Classroom deleted successfully")


@router.get("/{classroom_id}/members", response_model=list[MembershipSchema])
async def list_members(
    classroom_id: int, db: AsyncSession = Depends(get_db)
) -> list[ClassroomMembership]:
    return await storage.list_memberships(db, classroom_id=classroom_id)


@router.get("/{classroom_id}/analytics", response_model=ClassroomAnalytics)
async def get_analytics(
    classroom_id: int, db: AsyncSession = Depends(get_db)
) -> ClassroomAnalytics:
    return await storage.get_classroom_analytics(db, classroom_id)
