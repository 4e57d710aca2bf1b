"""
Course Schemas

Pydantic models for courses, lessons, reviews and enrollments.
"""

from datetime import datetime
from typing import Literal

from pydantic import Field

from .common import CamelModel, CourseSummary, PartialUpdate, UserSummary

CourseStatus = Literal["draft", "pending", "active", "rejected", "archived"]
EnrollmentStatus = Literal["active", "completed", "paused", "dropped"]


# Course Schemas
class CourseBase(CamelModel):
    """Base course schema with common fields and their defaults."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    category: str = Field(..., min_length=1, max_length=100)
    level: str = Field(..., min_length=1, max_length=50)
    price: float | None = Field(None, ge=0)
    duration: int | None = Field(None, ge=0, description="Minutes")
    mentor_id: int | None = None
    image_url: str | None = Field(None, max_length=500)
    is_active: bool = True
    status: CourseStatus = "draft"
    approved_by: int | None = None
    admin_notes: str | None = None
    syllabus: str | None = None
    prerequisites: list[str] = Field(default_factory=list)
    learning_objectives: list[str] = Field(default_factory=list)
    target_audience: str | None = Field(None, max_length=200)
    difficulty: int = Field(default=1, ge=1, le=5)
    estimated_weeks: int | None = Field(None, ge=0)
    max_students: int = Field(default=100, ge=1)
    current_enrollments: int = Field(default=0, ge=0)
    tags: list[str] = Field(default_factory=list)


class CourseCreate(CourseBase):
    pass


class CourseUpdate(PartialUpdate):
    """Partial course update; status moves by direct assignment."""

    nullable_fields = frozenset(
        {
            "description",
            "price",
            "duration",
            "mentor_id",
            "image_url",
            "approved_by",
            "admin_notes",
            "syllabus",
            "target_audience",
            "estimated_weeks",
        }
    )

    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    category: str | None = Field(None, min_length=1, max_length=100)
    level: str | None = Field(None, min_length=1, max_length=50)
    price: float | None = Field(None, ge=0)
    duration: int | None = Field(None, ge=0)
    mentor_id: int | None = None
    image_url: str | None = None
    is_active: bool | None = None
    status: CourseStatus | None = None
    approved_by: int | None = None
    admin_notes: str | None = None
    syllabus: str | None = None
    prerequisites: list[str] | None = None
    learning_objectives: list[str] | None = None
    target_audience: str | None = None
    difficulty: int | None = Field(None, ge=1, le=5)
    estimated_weeks: int | None = Field(None, ge=0)
    max_students: int | None = Field(None, ge=1)
    current_enrollments: int | None = Field(None, ge=0)
    tags: list[str] | None = None


class CourseSchema(CourseBase):
    """Course response schema used in listings."""

    id: int
    created_at: datetime
    updated_at: datetime
    mentor: UserSummary | None = None
    enrollment_count: int = 0
    review_count: int = 0


# Lessons and reviews
class LessonCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    content: str | None = None
    video_url: str | None = Field(None, max_length=500)
    duration: int | None = Field(None, ge=0)
    sort_order: int = Field(default=0, ge=0)


class LessonSchema(LessonCreate):
    id: int
    course_id: int
    created_at: datetime


class ReviewCreate(CamelModel):
    user_id: int
    rating: int = Field(..., ge=1, le=5)
    comment: str | None = None


class ReviewSchema(ReviewCreate):
    id: int
    course_id: int
    created_at: datetime
    user: UserSummary


# Enrollment Schemas
class EnrollmentCreate(CamelModel):
    user_id: int
    course_id: int
    progress: int = Field(default=0, ge=0, le=100)
    status: EnrollmentStatus = "active"


class EnrollmentUpdate(PartialUpdate):
    progress: int | None = Field(None, ge=0, le=100)
    status: EnrollmentStatus | None = None


class EnrollmentSchema(CamelModel):
    id: int
    user_id: int
    course_id: int
    progress: int
    status: str
    enrolled_at: datetime
    completed_at: datetime | None = None
    user: UserSummary
    course: CourseSummary


class CourseEnrollment(CamelModel):
    """Enrollment as embedded in a course detail."""

    id: int
    user_id: int
    progress: int
    status: str
    enrolled_at: datetime
    user: UserSummary


class CourseDetail(CourseSchema):
    """Course with its enrollments, reviews and ordered lessons."""

    enrollments: list[CourseEnrollment] = Field(default_factory=list)
    reviews: list[ReviewSchema] = Field(default_factory=list)
    lessons: list[LessonSchema] = Field(default_factory=list)
