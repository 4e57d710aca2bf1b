"""
User Models

Platform accounts and the public profiles mentors publish.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .classrooms import ClassroomMembership
    from .community import Post
    from .courses import Course, Enrollment

from sqlalchemy import JSON, Boolean, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, IntegerPrimaryKeyMixin, TimestampMixin


class User(Base, IntegerPrimaryKeyMixin, TimestampMixin):
    """Student, mentor, master or admin account."""

    __tablename__ = "users"

    # Identity
    username: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(
        String(255), nullable=False, comment="bcrypt hash, never the plaintext"
    )

    # Authorization
    role: Mapped[str] = mapped_column(
        String(20), default="student", comment="student, mentor, master, admin"
    )
    is_master: Mapped[bool] = mapped_column(Boolean, default=False)

    # Profile
    first_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    avatar: Mapped[str | None] = mapped_column(String(500), nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Gamification
    xp: Mapped[int] = mapped_column(Integer, default=0)
    level: Mapped[int] = mapped_column(Integer, default=1)

    # Relationships
    courses: Mapped[list[Course]] = relationship(
        back_populates="mentor", foreign_keys="Course.mentor_id", passive_deletes=True
    )
    enrollments: Mapped[list[Enrollment]] = relationship(
        back_populates="user", passive_deletes="all"
    )
    mentor_profiles: Mapped[list[MentorProfile]] = relationship(
        back_populates="user", passive_deletes="all"
    )
    memberships: Mapped[list[ClassroomMembership]] = relationship(
        back_populates="user", passive_deletes="all"
    )
    posts: Mapped[list[Post]] = relationship(back_populates="user", passive_deletes="all")


class MentorProfile(Base, IntegerPrimaryKeyMixin, TimestampMixin):
    """Public mentor listing shown in the mentor directory."""

    __tablename__ = "mentor_profiles"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    specialization: Mapped[str | None] = mapped_column(String(200), nullable=True)
    experience: Mapped[str | None] = mapped_column(String(200), nullable=True)
    hourly_rate: Mapped[str | None] = mapped_column(String(50), nullable=True)
    location: Mapped[str | None] = mapped_column(String(200), nullable=True)
    languages: Mapped[list[str]] = mapped_column(JSON, default=list)
    badges: Mapped[list[str]] = mapped_column(JSON, default=list)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    availability: Mapped[str | None] = mapped_column(String(200), nullable=True)

    # Aggregates maintained by the mentor dashboard
    total_students: Mapped[int] = mapped_column(Integer, default=0)
    total_reviews: Mapped[int] = mapped_column(Integer, default=0)
    average_rating: Mapped[float] = mapped_column(Float, default=0.0)
    is_verified: Mapped[bool] = mapped_column(Boolean, default=False)

    user: Mapped[User] = relationship(back_populates="mentor_profiles")
