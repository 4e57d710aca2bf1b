"""
Workflow Request Models

Records created as ``pending`` and moved to ``approved`` or ``rejected`` by a
reviewer. Review timestamps are stamped by the data-access layer.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .classrooms import Classroom
    from .mentorship import MentorConversation, MentorshipSession
    from .users import User

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, IntegerPrimaryKeyMixin, TimestampMixin

REQUEST_STATUSES = ("pending", "approved", "rejected")


class StaffRequest(Base, IntegerPrimaryKeyMixin, TimestampMixin):
    """Mentor asking to join a classroom's staff."""

    __tablename__ = "staff_requests"

    mentor_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    classroom_id: Mapped[int] = mapped_column(
        ForeignKey("classrooms.id", ondelete="CASCADE"), nullable=False, index=True
    )
    message: Mapped[str | None] = mapped_column(Text, nullable=True)

    status: Mapped[str] = mapped_column(String(20), default="pending")
    reviewed_by: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )
    reviewed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    admin_notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    mentor: Mapped[User] = relationship(foreign_keys=[mentor_id])
    classroom: Mapped[Classroom] = relationship()
    reviewer: Mapped[User | None] = relationship(foreign_keys=[reviewed_by])


class MasterRoleRequest(Base, IntegerPrimaryKeyMixin, TimestampMixin):
    """Mentor applying to become a master (classroom owner)."""

    __tablename__ = "master_role_requests"

    mentor_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    experience: Mapped[str] = mapped_column(Text, nullable=False)
    qualifications: Mapped[str] = mapped_column(Text, nullable=False)
    motivation: Mapped[str] = mapped_column(Text, nullable=False)
    portfolio: Mapped[str | None] = mapped_column(Text, nullable=True)

    status: Mapped[str] = mapped_column(String(20), default="pending")
    reviewed_by: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )
    reviewed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    approved_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    rejected_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    admin_notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    mentor: Mapped[User] = relationship(foreign_keys=[mentor_id])
    reviewer: Mapped[User | None] = relationship(foreign_keys=[reviewed_by])


class MentorshipRequest(Base, IntegerPrimaryKeyMixin, TimestampMixin):
    """Student asking a mentor for one-to-one mentorship."""

    __tablename__ = "mentorship_requests"

    student_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    mentor_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    message: Mapped[str | None] = mapped_column(Text, nullable=True)
    subject: Mapped[str | None] = mapped_column(String(200), nullable=True)
    experience_level: Mapped[str | None] = mapped_column(String(50), nullable=True)
    goals: Mapped[str | None] = mapped_column(Text, nullable=True)
    time_commitment: Mapped[str | None] = mapped_column(String(100), nullable=True)
    preferred_schedule: Mapped[str | None] = mapped_column(String(200), nullable=True)

    status: Mapped[str] = mapped_column(String(20), default="pending")
    mentor_response: Mapped[str | None] = mapped_column(Text, nullable=True)
    responded_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    student: Mapped[User] = relationship(foreign_keys=[student_id])
    mentor: Mapped[User] = relationship(foreign_keys=[mentor_id])
    conversations: Mapped[list[MentorConversation]] = relationship(
        back_populates="mentorship_request",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="MentorConversation.created_at",
    )
    sessions: Mapped[list[MentorshipSession]] = relationship(
        back_populates="mentorship_request",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="MentorshipSession.scheduled_at.desc()",
    )


class ResignationRequest(Base, IntegerPrimaryKeyMixin, TimestampMixin):
    """Staff mentor asking the classroom master to leave."""

    __tablename__ = "resignation_requests"

    mentor_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    classroom_id: Mapped[int] = mapped_column(
        ForeignKey("classrooms.id", ondelete="CASCADE"), nullable=False, index=True
    )
    reason: Mapped[str] = mapped_column(Text, nullable=False)
    last_work_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    status: Mapped[str] = mapped_column(String(20), default="pending")
    reviewed_by: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )
    reviewed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    master_notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    mentor: Mapped[User] = relationship(foreign_keys=[mentor_id])
    classroom: Mapped[Classroom] = relationship()
    reviewer: Mapped[User | None] = relationship(foreign_keys=[reviewed_by])
