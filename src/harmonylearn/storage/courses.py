"""
Course, Lesson, Review and Enrollment Storage
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from harmonylearn.core.models import Course, CourseReview, Enrollment, Lesson
from harmonylearn.core.models.base import utcnow
from harmonylearn.core.schemas import (
    CourseCreate,
    CourseUpdate,
    EnrollmentCreate,
    EnrollmentUpdate,
    LessonCreate,
    ReviewCreate,
)
from harmonylearn.core.validation import validate_payload

from .base import apply_changes, changed_fields, commit, delete_row, fetch_all, fetch_one, require

logger = logging.getLogger(__name__)

COURSE_LIST_OPTIONS = (
    selectinload(Course.mentor),
    selectinload(Course.enrollments),
    selectinload(Course.reviews),
)

COURSE_DETAIL_OPTIONS = (
    selectinload(Course.mentor),
    selectinload(Course.enrollments).selectinload(Enrollment.user),
    selectinload(Course.reviews).selectinload(CourseReview.user),
    selectinload(Course.lessons),
)

ENROLLMENT_OPTIONS = (selectinload(Enrollment.user), selectinload(Enrollment.course))


# ============================================================================
# Courses
# ============================================================================


async def list_courses(session: AsyncSession) -> list[Course]:
    """All courses, newest first, with mentor and enrollment/review counts."""
    return await fetch_all(
        session,
        select(Course)
        .options(*COURSE_LIST_OPTIONS)
        .order_by(Course.created_at.desc(), Course.id.desc()),
    )


async def get_course_by_id(session: AsyncSession, course_id: int) -> Course | None:
    """Course with enrollments, reviews and lessons in sort order."""
    return await fetch_one(
        session, select(Course).where(Course.id == course_id).options(*COURSE_DETAIL_OPTIONS)
    )


async def create_course(session: AsyncSession, data: CourseCreate | Mapping[str, Any]) -> Course:
    course_data = validate_payload(CourseCreate, data)
    course = Course(**course_data.model_dump())
    session.add(course)
    await commit(session, "Course")

    logger.info(f"Created course {course.id} '{course.title}'")
    return require(await get_course_by_id(session, course.id), "Course", course.id)


async def update_course(
    session: AsyncSession, course_id: int, changes: CourseUpdate | Mapping[str, Any]
) -> Course:
    values = changed_fields(validate_payload(CourseUpdate, changes))
    course = require(await session.get(Course, course_id), "Course", course_id)
    apply_changes(course, values)
    await commit(session, "Course")

    return require(await get_course_by_id(session, course_id), "Course", course_id)


async def delete_course(session: AsyncSession, course_id: int) -> None:
    await delete_row(session, Course, course_id, "Course")


async def create_lesson(
    session: AsyncSession, course_id: int, data: LessonCreate | Mapping[str, Any]
) -> Lesson:
    lesson_data = validate_payload(LessonCreate, data)
    require(await session.get(Course, course_id), "Course", course_id)

    lesson = Lesson(course_id=course_id, **lesson_data.model_dump())
    session.add(lesson)
    await commit(session, "Lesson")
    return lesson


async def create_review(
    session: AsyncSession, course_id: int, data: ReviewCreate | Mapping[str, Any]
) -> CourseReview:
    """One review per user and course; a second one is a conflict."""
    review_data = validate_payload(ReviewCreate, data)
    require(await session.get(Course, course_id), "Course", course_id)

    review = CourseReview(course_id=course_id, **review_data.model_dump())
    session.add(review)
    await commit(session, "Review")

    return require(
        await fetch_one(
            session,
            select(CourseReview)
            .where(CourseReview.id == review.id)
            .options(selectinload(CourseReview.user)),
        ),
        "Review",
        review.id,
    )


# ============================================================================
# Enrollments
# ============================================================================


def _enrollment_query() -> Select[tuple[Enrollment]]:
    return select(Enrollment).options(*ENROLLMENT_OPTIONS)


async def list_enrollments(session: AsyncSession) -> list[Enrollment]:
    return await fetch_all(
        session, _enrollment_query().order_by(Enrollment.enrolled_at.desc(), Enrollment.id.desc())
    )


async def get_enrollment_by_id(session: AsyncSession, enrollment_id: int) -> Enrollment | None:
    return await fetch_one(session, _enrollment_query().where(Enrollment.id == enrollment_id))


async def list_enrollments_by_user(session: AsyncSession, user_id: int) -> list[Enrollment]:
    return await fetch_all(
        session,
        _enrollment_query()
        .where(Enrollment.user_id == user_id)
        .order_by(Enrollment.enrolled_at.desc(), Enrollment.id.desc()),
    )


async def list_enrollments_by_course(session: AsyncSession, course_id: int) -> list[Enrollment]:
    return await fetch_all(
        session,
        _enrollment_query()
        .where(Enrollment.course_id == course_id)
        .order_by(Enrollment.enrolled_at.desc(), Enrollment.id.desc()),
    )


async def create_enrollment(
    session: AsyncSession, data: EnrollmentCreate | Mapping[str, Any]
) -> Enrollment:
    """Enroll a user; enrolling twice in the same course is a conflict."""
    enrollment_data = validate_payload(EnrollmentCreate, data)
    enrollment = Enrollment(**enrollment_data.model_dump())
    if enrollment.status == "completed":
        enrollment.completed_at = utcnow()
    session.add(enrollment)
    await commit(session, "Enrollment")

    logger.info(f"User {enrollment.user_id} enrolled in course {enrollment.course_id}")
    return require(await get_enrollment_by_id(session, enrollment.id), "Enrollment", enrollment.id)


async def update_enrollment(
    session: AsyncSession, enrollment_id: int, changes: EnrollmentUpdate | Mapping[str, Any]
) -> Enrollment:
    """Update progress or status. Moving to ``completed`` stamps completed_at."""
    values = changed_fields(validate_payload(EnrollmentUpdate, changes))
    enrollment = require(await session.get(Enrollment, enrollment_id), "Enrollment", enrollment_id)

    if values.get("status") == "completed" and enrollment.status != "completed":
        values["completed_at"] = utcnow()
    apply_changes(enrollment, values)
    await commit(session, "Enrollment")

    return require(await get_enrollment_by_id(session, enrollment_id), "Enrollment", enrollment_id)


async def delete_enrollment(session: AsyncSession, enrollment_id: int) -> None:
    await delete_row(session, Enrollment, enrollment_id, "Enrollment")
