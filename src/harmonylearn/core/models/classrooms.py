"""
Classroom Models

Academies owned by a master, their members, live sessions and weekly
timetable.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .users import User

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, IntegerPrimaryKeyMixin, TimestampMixin, utcnow


class Classroom(Base, IntegerPrimaryKeyMixin, TimestampMixin):
    """Classroom ("academy") with a public, brandable landing page."""

    __tablename__ = "classrooms"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    subject: Mapped[str] = mapped_column(String(100), nullable=False)
    level: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    master_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )
    max_students: Mapped[int] = mapped_column(Integer, default=50)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    # Landing page content
    academy_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    about: Mapped[str | None] = mapped_column(Text, nullable=True)
    instruments: Mapped[list[str]] = mapped_column(JSON, default=list)
    curriculum: Mapped[str | None] = mapped_column(Text, nullable=True)
    features: Mapped[list[str]] = mapped_column(JSON, default=list)
    testimonials: Mapped[str | None] = mapped_column(Text, nullable=True)
    pricing: Mapped[str | None] = mapped_column(Text, nullable=True)
    schedule: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Branding
    hero_image: Mapped[str | None] = mapped_column(String(500), nullable=True)
    logo_image: Mapped[str | None] = mapped_column(String(500), nullable=True)
    about_image: Mapped[str | None] = mapped_column(String(500), nullable=True)
    primary_color: Mapped[str] = mapped_column(String(7), default="#3B82F6")
    secondary_color: Mapped[str] = mapped_column(String(7), default="#10B981")

    # Contact
    contact_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    contact_phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    website: Mapped[str | None] = mapped_column(String(500), nullable=True)
    social_links: Mapped[str | None] = mapped_column(Text, nullable=True)
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)

    is_public: Mapped[bool] = mapped_column(Boolean, default=True)
    custom_slug: Mapped[str | None] = mapped_column(
        String(100), unique=True, nullable=True, comment="Public URL slug"
    )

    # Relationships
    master: Mapped[User | None] = relationship()
    memberships: Mapped[list[ClassroomMembership]] = relationship(
        back_populates="classroom",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="ClassroomMembership.joined_at.desc()",
    )
    live_sessions: Mapped[list[LiveSession]] = relationship(
        back_populates="classroom",
        passive_deletes=True,
        order_by="LiveSession.scheduled_at.desc()",
    )
    schedules: Mapped[list[Schedule]] = relationship(
        back_populates="classroom",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="[Schedule.day_of_week, Schedule.start_time]",
    )

    @property
    def member_count(self) -> int:
        return len(self.memberships)

    @property
    def live_session_count(self) -> int:
        return len(self.live_sessions)


class ClassroomMembership(Base, IntegerPrimaryKeyMixin):
    """Grants a user a role (student or staff) inside a classroom."""

    __tablename__ = "classroom_memberships"
    __table_args__ = (
        UniqueConstraint("user_id", "classroom_id", name="uq_membership_user_classroom"),
    )

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    classroom_id: Mapped[int] = mapped_column(
        ForeignKey("classrooms.id", ondelete="CASCADE"), nullable=False, index=True
    )
    role: Mapped[str] = mapped_column(String(20), default="student", comment="student, staff")
    status: Mapped[str] = mapped_column(String(20), default="active", comment="active, inactive")
    joined_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )

    user: Mapped[User] = relationship(back_populates="memberships")
    classroom: Mapped[Classroom] = relationship(back_populates="memberships")


class LiveSession(Base, IntegerPrimaryKeyMixin, TimestampMixin):
    """Scheduled live lesson run by a mentor."""

    __tablename__ = "live_sessions"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    mentor_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    classroom_id: Mapped[int | None] = mapped_column(
        ForeignKey("classrooms.id", ondelete="SET NULL"), nullable=True, index=True
    )
    scheduled_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    duration: Mapped[int] = mapped_column(Integer, default=60, comment="Minutes")
    max_participants: Mapped[int] = mapped_column(Integer, default=50)
    attendee_count: Mapped[int] = mapped_column(Integer, default=0)
    status: Mapped[str] = mapped_column(
        String(20), default="scheduled", comment="scheduled, live, completed, cancelled"
    )
    recording_url: Mapped[str | None] = mapped_column(String(500), nullable=True)

    mentor: Mapped[User] = relationship()
    classroom: Mapped[Classroom | None] = relationship(back_populates="live_sessions")


class Schedule(Base, IntegerPrimaryKeyMixin, TimestampMixin):
    """Weekly timetable slot in a classroom."""

    __tablename__ = "schedules"
    __table_args__ = (
        CheckConstraint("day_of_week BETWEEN 0 AND 6", name="check_schedule_day_of_week"),
    )

    classroom_id: Mapped[int] = mapped_column(
        ForeignKey("classrooms.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    day_of_week: Mapped[int] = mapped_column(Integer, nullable=False, comment="0 = Sunday")
    start_time: Mapped[str] = mapped_column(String(5), nullable=False, comment="HH:MM")
    end_time: Mapped[str] = mapped_column(String(5), nullable=False, comment="HH:MM")
    instructor_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    subject: Mapped[str | None] = mapped_column(String(100), nullable=True)
    session_type: Mapped[str] = mapped_column(String(20), default="lesson")
    max_students: Mapped[int] = mapped_column(Integer, default=20)
    is_recurring: Mapped[bool] = mapped_column(Boolean, default=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    classroom: Mapped[Classroom] = relationship(back_populates="schedules")
    instructor: Mapped[User] = relationship()
    enrollments: Mapped[list[ScheduleEnrollment]] = relationship(
        back_populates="schedule", cascade="all, delete-orphan", passive_deletes=True
    )


class ScheduleEnrollment(Base, IntegerPrimaryKeyMixin):
    """Student signed up for a timetable slot."""

    __tablename__ = "schedule_enrollments"
    __table_args__ = (
        UniqueConstraint("schedule_id", "student_id", name="uq_schedule_enrollment_student"),
    )

    schedule_id: Mapped[int] = mapped_column(
        ForeignKey("schedules.id", ondelete="CASCADE"), nullable=False, index=True
    )
    student_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    enrolled_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )

    schedule: Mapped[Schedule] = relationship(back_populates="enrollments")
    student: Mapped[User] = relationship()
