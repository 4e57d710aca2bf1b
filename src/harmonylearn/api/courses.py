"""
Course API Endpoints

Course catalogue with lessons and reviews.
"""
# ruff: noqa: B008 - FastAPI Depends in function defaults is standard pattern

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from harmonylearn import storage
from harmonylearn.core.database import get_db
from harmonylearn.core.errors import NotFoundError
from harmonylearn.core.models import Course, CourseReview, Lesson
from harmonylearn.core.schemas import (
    CourseCreate,
    CourseDetail,
    CourseSchema,
    CourseUpdate,
    LessonCreate,
    LessonSchema,
    MessageResponse,
    ReviewCreate,
    ReviewSchema,
)

router = APIRouter()


@router.get("", response_model=list[CourseSchema])
async def list_courses(db: AsyncSession = Depends(get_db)) -> list[Course]:
    """List courses with mentor and enrollment/review counts."""
    return await storage.list_courses(db)


@router.get("/{course_id}", response_model=CourseDetail)
async def get_course(course_id: int, db: AsyncSession = Depends(get_db)) -> Course:
    """Get a course with enrollments, reviews and lessons."""
    course = await storage.get_course_by_id(db, course_id)
    if not course:
        raise NotFoundError("Course", course_id)
    return course


@router.post("", response_model=CourseDetail, status_code=status.HTTP_201_CREATED)
async def create_course(course_data: CourseCreate, db: AsyncSession = Depends(get_db)) -> Course:
    return await storage.create_course(db, course_data)


@router.patch("/{course_id}", response_model=CourseDetail)
async def update_course(
    course_id: int, course_data: CourseUpdate, db: AsyncSession = Depends(get_db)
) -> Course:
    """Partial update, including status changes such as draft to pending."""
    return await storage.update_course(db, course_id, course_data)


@router.delete("/{course_id}", response_model=MessageResponse)
async def delete_course(course_id: int, db: AsyncSession = Depends(get_db)) -> MessageResponse:
    await storage.delete_course(db, course_id)
    return MessageResponse(message="Course deleted successfully")


@router.post(
    "/{course_id}/lessons", response_model=LessonSchema, status_code=status.HTTP_201_CREATED
)
async def create_lesson(
    course_id: int, lesson_data: LessonCreate, db: AsyncSession = Depends(get_db)
) -> Lesson:
    return await storage.create_lesson(db, course_id, lesson_data)


@router.post(
    "/{course_id}/reviews", response_model=ReviewSchema, status_code=status.HTTP_201_CREATED
)
async def create_review(
    course_id: int, review_data: ReviewCreate, db: AsyncSession = Depends(get_db)
) -> CourseReview:
    """Review a course. One review per user."""
    return await storage.create_review(db, course_id, review_data)
