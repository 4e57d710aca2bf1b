"""
Classroom Schemas

Pydantic models for classrooms, memberships, live sessions and schedules.
"""

from datetime import datetime
from typing import Literal

from pydantic import EmailStr, Field, field_validator, model_validator

from harmonylearn.core.validation import (
    validate_hex_color,
    validate_slug,
    validate_time_of_day,
    validate_time_range,
)

from .common import (
    ActiveStatus,
    CamelModel,
    ClassroomSummary,
    MembershipRole,
    PartialUpdate,
    UserRoleSummary,
    UserSummary,
)

LiveSessionStatus = Literal["scheduled", "live", "completed", "cancelled"]


# Classroom Schemas
class ClassroomBase(CamelModel):
    """Base classroom schema with common fields and their defaults."""

    title: str = Field(..., min_length=1, max_length=200)
    subject: str = Field(..., min_length=1, max_length=100)
    level: str = Field(..., min_length=1, max_length=50)
    description: str | None = None
    master_id: int | None = None
    max_students: int = Field(default=50, ge=1)
    is_active: bool = True
    academy_name: str | None = Field(None, max_length=200)
    about: str | None = None
    instruments: list[str] = Field(default_factory=list)
    curriculum: str | None = None
    hero_image: str | None = Field(None, max_length=500)
    logo_image: str | None = Field(None, max_length=500)
    about_image: str | None = Field(None, max_length=500)
    primary_color: str = "#3B82F6"
    secondary_color: str = "#10B981"
    contact_email: str | None = Field(None, max_length=255)
    contact_phone: str | None = Field(None, max_length=50)
    website: str | None = Field(None, max_length=500)
    social_links: str | None = None
    features: list[str] = Field(default_factory=list)
    testimonials: str | None = None
    pricing: str | None = None
    schedule: str | None = None
    address: str | None = Field(None, max_length=500)
    is_public: bool = True
    custom_slug: str | None = None


class ClassroomCreate(ClassroomBase):
    contact_email: EmailStr | None = None

    @field_validator("primary_color", "secondary_color")
    @classmethod
    def check_color(cls, v: str) -> str:
        return validate_hex_color(v)

    @field_validator("custom_slug")
    @classmethod
    def check_slug(cls, v: str | None) -> str | None:
        return validate_slug(v) if v is not None else v


class ClassroomUpdate(PartialUpdate):
    nullable_fields = frozenset(
        {
            "description",
            "master_id",
            "academy_name",
            "about",
            "curriculum",
            "hero_image",
            "logo_image",
            "about_image",
            "contact_email",
            "contact_phone",
            "website",
            "social_links",
            "testimonials",
            "pricing",
            "schedule",
            "address",
            "custom_slug",
        }
    )

    title: str | None = Field(None, min_length=1, max_length=200)
    subject: str | None = Field(None, min_length=1, max_length=100)
    level: str | None = Field(None, min_length=1, max_length=50)
    description: str | None = None
    master_id: int | None = None
    max_students: int | None = Field(None, ge=1)
    is_active: bool | None = None
    academy_name: str | None = None
    about: str | None = None
    instruments: list[str] | None = None
    curriculum: str | None = None
    hero_image: str | None = None
    logo_image: str | None = None
    about_image: str | None = None
    primary_color: str | None = None
    secondary_color: str | None = None
    contact_email: EmailStr | None = None
    contact_phone: str | None = None
    website: str | None = None
    social_links: str | None = None
    features: list[str] | None = None
    testimonials: str | None = None
    pricing: str | None = None
    schedule: str | None = None
    address: str | None = None
    is_public: bool | None = None
    custom_slug: str | None = None

    @field_validator("primary_color", "secondary_color")
    @classmethod
    def check_color(cls, v: str | None) -> str | None:
        return validate_hex_color(v) if v is not None else v

    @field_validator("custom_slug")
    @classmethod
    def check_slug(cls, v: str | None) -> str | None:
        return validate_slug(v) if v is not None else v


class ClassroomSchema(ClassroomBase):
    """Classroom response schema used in listings."""

    id: int
    created_at: datetime
    updated_at: datetime
    master: UserSummary | None = None
    member_count: int = 0
    live_session_count: int = 0


# Membership Schemas
class MembershipCreate(CamelModel):
    user_id: int
    classroom_id: int
    role: MembershipRole = "student"
    status: ActiveStatus = "active"


class MembershipUpdate(PartialUpdate):
    role: MembershipRole | None = None
    status: ActiveStatus | None = None


class MembershipSchema(CamelModel):
    id: int
    user_id: int
    classroom_id: int
    role: str
    status: str
    joined_at: datetime
    user: UserRoleSummary
    classroom: ClassroomSummary


class ClassroomMember(CamelModel):
    """Membership as embedded in a classroom detail."""

    id: int
    user_id: int
    role: str
    status: str
    joined_at: datetime
    user: UserRoleSummary


class StaffClassroomInfo(CamelModel):
    """Classroom a mentor currently works in as staff."""

    classroom_id: int
    classroom_title: str
    academy_name: str | None = None
    master: UserSummary | None = None
    joined_at: datetime
    role: str


class ClassroomAnalytics(CamelModel):
    total_students: int
    total_staff: int
    total_sessions: int
    average_attendance: float
    recent_activity: list[ClassroomMember] = Field(default_factory=list)


# Live Session Schemas
class LiveSessionCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    mentor_id: int
    classroom_id: int | None = None
    scheduled_at: datetime
    duration: int = Field(default=60, ge=1)
    max_participants: int = Field(default=50, ge=1)
    status: LiveSessionStatus = "scheduled"


class LiveSessionUpdate(PartialUpdate):
    nullable_fields = frozenset({"description", "recording_url"})

    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    scheduled_at: datetime | None = None
    duration: int | None = Field(None, ge=1)
    max_participants: int | None = Field(None, ge=1)
    attendee_count: int | None = Field(None, ge=0)
    status: LiveSessionStatus | None = None
    recording_url: str | None = Field(None, max_length=500)


class LiveSessionBrief(CamelModel):
    id: int
    title: str
    description: str | None = None
    mentor_id: int
    classroom_id: int | None = None
    scheduled_at: datetime
    duration: int
    max_participants: int
    attendee_count: int
    status: str
    recording_url: str | None = None
    created_at: datetime
    mentor: UserSummary


class LiveSessionSchema(LiveSessionBrief):
    classroom: ClassroomSummary | None = None


# Schedule Schemas
class ScheduleBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    day_of_week: int = Field(..., ge=0, le=6, description="0 = Sunday")
    start_time: str
    end_time: str
    instructor_id: int
    subject: str | None = Field(None, max_length=100)
    session_type: str = Field(default="lesson", max_length=20)
    max_students: int = Field(default=20, ge=1)
    is_recurring: bool = True
    is_active: bool = True

    @field_validator("start_time", "end_time")
    @classmethod
    def check_time(cls, v: str) -> str:
        return validate_time_of_day(v)


class ScheduleCreate(ScheduleBase):
    classroom_id: int

    @model_validator(mode="after")
    def check_range(self) -> "ScheduleCreate":
        validate_time_range(self.start_time, self.end_time)
        return self


class ScheduleUpdate(PartialUpdate):
    nullable_fields = frozenset({"description", "subject"})

    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    day_of_week: int | None = Field(None, ge=0, le=6)
    start_time: str | None = None
    end_time: str | None = None
    instructor_id: int | None = None
    subject: str | None = None
    session_type: str | None = None
    max_students: int | None = Field(None, ge=1)
    is_recurring: bool | None = None
    is_active: bool | None = None

    @field_validator("start_time", "end_time")
    @classmethod
    def check_time(cls, v: str | None) -> str | None:
        return validate_time_of_day(v) if v is not None else v


class ScheduleEnrollmentSchema(CamelModel):
    id: int
    student_id: int
    enrolled_at: datetime
    student: UserSummary


class ScheduleBrief(ScheduleBase):
    id: int
    classroom_id: int
    created_at: datetime
    updated_at: datetime
    instructor: UserSummary


class ScheduleSchema(ScheduleBrief):
    classroom: ClassroomSummary
    enrollments: list[ScheduleEnrollmentSchema] = Field(default_factory=list)


class ClassroomDetail(ClassroomSchema):
    """Classroom with members, live sessions and timetable."""

    memberships: list[ClassroomMember] = Field(default_factory=list)
    live_sessions: list[LiveSessionBrief] = Field(default_factory=list)
    schedules: list[ScheduleBrief] = Field(default_factory=list)
