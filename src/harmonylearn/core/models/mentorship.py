"""
Mentorship Models

Messages exchanged on a mentorship request and the one-to-one sessions
booked from it.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .requests import MentorshipRequest
    from .users import User

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, IntegerPrimaryKeyMixin, TimestampMixin


class MentorConversation(Base, IntegerPrimaryKeyMixin, TimestampMixin):
    """Single message in a mentorship request thread."""

    __tablename__ = "mentor_conversations"

    mentorship_request_id: Mapped[int] = mapped_column(
        ForeignKey("mentorship_requests.id", ondelete="CASCADE"), nullable=False, index=True
    )
    sender_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    message: Mapped[str] = mapped_column(Text, nullable=False)
    message_type: Mapped[str] = mapped_column(String(20), default="text")
    attachment_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    is_read: Mapped[bool] = mapped_column(Boolean, default=False)

    mentorship_request: Mapped[MentorshipRequest] = relationship(back_populates="conversations")
    sender: Mapped[User] = relationship()


class MentorshipSession(Base, IntegerPrimaryKeyMixin, TimestampMixin):
    """One-to-one session between a mentor and a student."""

    __tablename__ = "mentorship_sessions"

    mentorship_request_id: Mapped[int] = mapped_column(
        ForeignKey("mentorship_requests.id", ondelete="CASCADE"), nullable=False, index=True
    )
    mentor_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    student_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    scheduled_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    duration: Mapped[int] = mapped_column(Integer, default=60, comment="Minutes")
    title: Mapped[str | None] = mapped_column(String(200), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), default="scheduled", comment="scheduled, completed, cancelled"
    )
    meeting_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    mentorship_request: Mapped[MentorshipRequest] = relationship(back_populates="sessions")
    mentor: Mapped[User] = relationship(foreign_keys=[mentor_id])
    student: Mapped[User] = relationship(foreign_keys=[student_id])
