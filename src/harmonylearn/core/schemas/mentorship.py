"""
Mentorship Schemas

Conversation messages and one-to-one sessions attached to a mentorship
request.
"""

from datetime import datetime
from typing import Literal

from pydantic import Field

from .common import CamelModel, PartialUpdate, UserSummary
from .requests import MentorshipRequestSchema

MessageType = Literal["text", "audio", "file"]
MentorshipSessionStatus = Literal["scheduled", "completed", "cancelled"]


# Conversations
class ConversationCreate(CamelModel):
    mentorship_request_id: int
    sender_id: int
    message: str = Field(..., min_length=1)
    message_type: MessageType = "text"
    attachment_url: str | None = Field(None, max_length=500)


class ConversationSchema(CamelModel):
    id: int
    mentorship_request_id: int
    sender_id: int
    message: str
    message_type: str
    attachment_url: str | None = None
    is_read: bool
    created_at: datetime
    sender: UserSummary


# Sessions
class MentorshipSessionCreate(CamelModel):
    mentorship_request_id: int
    mentor_id: int
    student_id: int
    scheduled_at: datetime
    duration: int = Field(default=60, ge=1)
    title: str | None = Field(None, max_length=200)
    description: str | None = None
    status: MentorshipSessionStatus = "scheduled"
    meeting_url: str | None = Field(None, max_length=500)


class MentorshipSessionUpdate(PartialUpdate):
    nullable_fields = frozenset({"title", "description", "meeting_url", "notes"})

    scheduled_at: datetime | None = None
    duration: int | None = Field(None, ge=1)
    title: str | None = Field(None, max_length=200)
    description: str | None = None
    status: MentorshipSessionStatus | None = None
    meeting_url: str | None = Field(None, max_length=500)
    notes: str | None = None


class MentorshipSessionBrief(CamelModel):
    """Session as embedded in a mentorship request detail."""

    id: int
    mentorship_request_id: int
    mentor_id: int
    student_id: int
    scheduled_at: datetime
    duration: int
    title: str | None = None
    description: str | None = None
    status: str
    meeting_url: str | None = None
    notes: str | None = None
    created_at: datetime


class MentorshipSessionSchema(MentorshipSessionBrief):
    mentor: UserSummary
    student: UserSummary


class MentorshipRequestDetail(MentorshipRequestSchema):
    """Request with its message thread (oldest first) and sessions."""

    conversations: list[ConversationSchema] = Field(default_factory=list)
    sessions: list[MentorshipSessionBrief] = Field(default_factory=list)
