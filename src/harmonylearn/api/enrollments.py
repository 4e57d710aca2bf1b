"""
Enrollment API Endpoints
"""
# ruff: noqa: B008 - FastAPI Depends in function defaults is standard pattern

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from harmonylearn import storage
from harmonylearn.core.database import get_db
from harmonylearn.core.models import Enrollment
from harmonylearn.core.schemas import (
    EnrollmentCreate,
    EnrollmentSchema,
    EnrollmentUpdate,
    MessageResponse,
)

router = APIRouter()


@router.get("", response_model=list[EnrollmentSchema])
async def list_enrollments(db: AsyncSession = Depends(get_db)) -> list[Enrollment]:
    return await storage.list_enrollments(db)


@router.get("/user/{user_id}", response_model=list[EnrollmentSchema])
async def list_user_enrollments(
    user_id: int, db: AsyncSession = Depends(get_db)
) -> list[Enrollment]:
    return await storage.list_enrollments_by_user(db, user_id)


@router.get("/course/{course_id}", response_model=list[EnrollmentSchema])
async def list_course_enrollments(
    course_id: int, db: AsyncSession = Depends(get_db)
) -> list[Enrollment]:
    return await storage.list_enrollments_by_course(db, course_id)


@router.post("", response_model=EnrollmentSchema, status_code=status.HTTP_201_CREATED)
async def create_enrollment(
    enrollment_data: EnrollmentCreate, db: AsyncSession = Depends(get_db)
) -> Enrollment:
    """Enroll a user in a course."""
    return await storage.create_enrollment(db, enrollment_data)


@router.patch("/{enrollment_id}", response_model=EnrollmentSchema)
async def update_enrollment(
    enrollment_id: int, enrollment_data: EnrollmentUpdate, db: AsyncSession = Depends(get_db)
) -> Enrollment:
    """Update progress or status. Completing stamps completedAt."""
    return await storage.update_enrollment(db, enrollment_id, enrollment_data)


@router.delete("/{enrollment_id}", response_model=MessageResponse)
async def delete_enrollment(
    enrollment_id: int, db: AsyncSession = Depends(get_db)
) -> MessageResponse:
    await storage.delete_enrollment(db, enrollment_id)
    return MessageResponse(message="Enrollment deleted successfully")
