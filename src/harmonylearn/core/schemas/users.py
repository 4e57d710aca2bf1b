"""
User Schemas

Pydantic models for accounts, authentication and mentor profiles.
"""

from datetime import datetime

from pydantic import EmailStr, Field, field_validator

from harmonylearn.core.validation import validate_password, validate_username

from .common import CamelModel, CourseSummary, PartialUpdate, UserRole, UserRoleSummary


# User Schemas
class UserBase(CamelModel):
    """Base user schema with common fields."""

    username: str
    email: EmailStr
    role: UserRole = "student"
    is_master: bool = False
    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    avatar: str | None = Field(None, max_length=500)
    bio: str | None = None
    xp: int = Field(default=0, ge=0)
    level: int = Field(default=1, ge=1)

    @field_validator("username")
    @classmethod
    def check_username(cls, v: str) -> str:
        return validate_username(v)


class UserCreate(UserBase):
    """Schema for creating a user. ``password`` is plaintext here."""

    password: str

    @field_validator("password")
    @classmethod
    def check_password(cls, v: str) -> str:
        return validate_password(v)


class UserUpdate(PartialUpdate):
    """Schema for updating a user. Only provided fields are written."""

    nullable_fields = frozenset({"first_name", "last_name", "avatar", "bio"})

    username: str | None = None
    email: EmailStr | None = None
    password: str | None = None
    role: UserRole | None = None
    is_master: bool | None = None
    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    avatar: str | None = Field(None, max_length=500)
    bio: str | None = None
    xp: int | None = Field(None, ge=0)
    level: int | None = Field(None, ge=1)

    @field_validator("username")
    @classmethod
    def check_username(cls, v: str | None) -> str | None:
        return validate_username(v) if v is not None else v

    @field_validator("password")
    @classmethod
    def check_password(cls, v: str | None) -> str | None:
        return validate_password(v) if v is not None else v


class UserSchema(UserBase):
    """User response schema. Never includes the password hash."""

    id: int
    email: str
    created_at: datetime
    updated_at: datetime


# Mentor Profile Schemas
class MentorProfileBase(CamelModel):
    specialization: str | None = Field(None, max_length=200)
    experience: str | None = Field(None, max_length=200)
    hourly_rate: str | None = Field(None, max_length=50)
    location: str | None = Field(None, max_length=200)
    languages: list[str] = Field(default_factory=list)
    badges: list[str] = Field(default_factory=list)
    bio: str | None = None
    availability: str | None = Field(None, max_length=200)


class MentorProfileCreate(MentorProfileBase):
    user_id: int


class MentorProfileUpdate(PartialUpdate):
    nullable_fields = frozenset(
        {"specialization", "experience", "hourly_rate", "location", "bio", "availability"}
    )

    specialization: str | None = None
    experience: str | None = None
    hourly_rate: str | None = None
    location: str | None = None
    languages: list[str] | None = None
    badges: list[str] | None = None
    bio: str | None = None
    availability: str | None = None
    total_students: int | None = Field(None, ge=0)
    total_reviews: int | None = Field(None, ge=0)
    average_rating: float | None = Field(None, ge=0, le=5)
    is_verified: bool | None = None


class MentorProfileSchema(MentorProfileBase):
    """Mentor profile without the embedded user."""

    id: int
    user_id: int
    total_students: int
    total_reviews: int
    average_rating: float
    is_verified: bool
    created_at: datetime


class MentorProfileRead(MentorProfileSchema):
    user: UserRoleSummary


# Detail view of a user
class UserEnrollment(CamelModel):
    id: int
    course_id: int
    progress: int
    status: str
    enrolled_at: datetime
    completed_at: datetime | None = None
    course: CourseSummary


class UserDetail(UserSchema):
    mentor_profiles: list[MentorProfileSchema] = Field(default_factory=list)
    courses: list[CourseSummary] = Field(default_factory=list)
    enrollments: list[UserEnrollment] = Field(default_factory=list)


# Authentication
class AuthResponse(CamelModel):
    """Registration/login result. No session token is issued."""

    message: str
    user: UserSchema
