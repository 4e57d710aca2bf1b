"""
Mentor API Endpoints

Mentor profiles, plus per-mentor views of resignations and the classroom a
mentor currently staffs.
"""
# ruff: noqa: B008 - FastAPI Depends in function defaults is standard pattern

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from harmonylearn import storage
from harmonylearn.core.database import get_db
from harmonylearn.core.errors import NotFoundError
from harmonylearn.core.models import MentorProfile, ResignationRequest
from harmonylearn.core.schemas import (
    MentorProfileCreate,
    MentorProfileRead,
    MentorProfileUpdate,
    MessageResponse,
    ResignationRequestSchema,
    StaffClassroomInfo,
)

router = APIRouter()

# Served at /api/mentor-profiles
profiles_router = APIRouter()


@router.get("", response_model=list[MentorProfileRead])
async def list_mentors(db: AsyncSession = Depends(get_db)) -> list[MentorProfile]:
    """Mentor profiles, best rated first."""
    return await storage.list_mentor_profiles(db)


@profiles_router.get("", response_model=list[MentorProfileRead])
async def list_mentor_profiles(db: AsyncSession = Depends(get_db)) -> list[MentorProfile]:
    return await storage.list_mentor_profiles(db)


@router.post("", response_model=MentorProfileRead, status_code=status.HTTP_201_CREATED)
async def create_mentor_profile(
    profile_data: MentorProfileCreate, db: AsyncSession = Depends(get_db)
) -> MentorProfile:
    return await storage.create_mentor_profile(db, profile_data)


@router.get("/user/{user_id}", response_model=MentorProfileRead)
async def get_mentor_by_user(user_id: int, db: AsyncSession = Depends(get_db)) -> MentorProfile:
    profile = await storage.get_mentor_profile_by_user_id(db, user_id)
    if not profile:
        raise NotFoundError("Mentor profile", user_id)
    return profile


@router.get("/{mentor_id}/resignation-requests", response_model=list[ResignationRequestSchema])
async def list_mentor_resignations(
    mentor_id: int, db: AsyncSession = Depends(get_db)
) -> list[ResignationRequest]:
    return await storage.list_resignation_requests(db, mentor_id=mentor_id)


@router.get("/{mentor_id}/staff-classroom", response_model=StaffClassroomInfo)
async def get_staff_classroom(
    mentor_id: int, db: AsyncSession = Depends(get_db)
) -> StaffClassroomInfo:
    """Classroom where the mentor holds an active staff membership."""
    info = await storage.get_staff_classroom_info(db, mentor_id)
    if not info:
        raise NotFoundError("Staff classroom", mentor_id)
    return info


@router.get("/{profile_id}", response_model=MentorProfileRead)
async def get_mentor(profile_id: int, db: AsyncSession = Depends(get_db)) -> MentorProfile:
    profile = await storage.get_mentor_profile_by_id(db, profile_id)
    if not profile:
        raise NotFoundError("Mentor profile", profile_id)
    return profile


@router.patch("/{profile_id}", response_model=MentorProfileRead)
async def update_mentor(
    profile_id: int, profile_data: MentorProfileUpdate, db: AsyncSession = Depends(get_db)
) -> MentorProfile:
    return await storage.update_mentor_profile(db, profile_id, profile_data)


@router.delete("/{profile_id}", response_model=MessageResponse)
async def delete_mentor(profile_id: int, db: AsyncSession = Depends(get_db)) -> MessageResponse:
    await storage.delete_mentor_profile(db, profile_id)
    return MessageResponse(message="Mentor profile deleted successfully")
