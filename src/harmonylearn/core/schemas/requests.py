"""
Workflow Request Schemas

Staff, master-role, mentorship and resignation requests. Every request is
created ``pending`` and moved by a status update.
"""

from datetime import datetime
from typing import Any

from pydantic import Field, model_validator

from .common import CamelModel, ClassroomSummary, PartialUpdate, RequestStatus, UserSummary

MASTER_ROLE_FOREIGN_FIELDS = ("reason", "plannedClassrooms", "additionalQualifications")


class ReviewFields(CamelModel):
    """Audit fields shared by reviewed requests."""

    id: int
    status: str
    reviewed_by: int | None = None
    reviewed_at: datetime | None = None
    created_at: datetime
    updated_at: datetime
    mentor: UserSummary
    reviewer: UserSummary | None = None


# Staff Requests
class StaffRequestCreate(CamelModel):
    mentor_id: int
    classroom_id: int
    message: str | None = None


class StaffRequestStatusUpdate(CamelModel):
    status: RequestStatus
    reviewed_by: int | None = None
    admin_notes: str | None = None


class StaffRequestSchema(ReviewFields):
    mentor_id: int
    classroom_id: int
    message: str | None = None
    admin_notes: str | None = None
    classroom: ClassroomSummary


# Master Role Requests
class MasterRoleRequestCreate(CamelModel):
    """
    Application for the master role.

    Payloads carrying fields of other request types are rejected outright so
    that clients posting the wrong form get a clear message.
    """

    mentor_id: int
    experience: str = Field(..., min_length=1)
    qualifications: str = Field(..., min_length=1)
    motivation: str = Field(..., min_length=1)
    portfolio: str | None = None

    @model_validator(mode="before")
    @classmethod
    def reject_foreign_fields(cls, data: Any) -> Any:
        if isinstance(data, dict) and any(data.get(key) for key in MASTER_ROLE_FOREIGN_FIELDS):
            raise ValueError(
                "Invalid field names. Expected: mentorId, experience, qualifications, "
                "motivation. Received fields that belong to different request types."
            )
        return data


class MasterRoleRequestStatusUpdate(CamelModel):
    status: RequestStatus
    reviewed_by: int | None = None
    admin_notes: str | None = None


class MasterRoleRequestSchema(ReviewFields):
    mentor_id: int
    experience: str
    qualifications: str
    motivation: str
    portfolio: str | None = None
    approved_at: datetime | None = None
    rejected_at: datetime | None = None
    admin_notes: str | None = None


# Mentorship Requests
class MentorshipRequestCreate(CamelModel):
    student_id: int
    mentor_id: int
    message: str | None = None
    subject: str | None = Field(None, max_length=200)
    experience_level: str | None = Field(None, max_length=50)
    goals: str | None = None
    time_commitment: str | None = Field(None, max_length=100)
    preferred_schedule: str | None = Field(None, max_length=200)


class MentorshipRequestUpdate(PartialUpdate):
    nullable_fields = frozenset({"mentor_response"})

    status: RequestStatus | None = None
    mentor_response: str | None = None


class MentorshipRequestSchema(CamelModel):
    id: int
    student_id: int
    mentor_id: int
    message: str | None = None
    subject: str | None = None
    experience_level: str | None = None
    goals: str | None = None
    time_commitment: str | None = None
    preferred_schedule: str | None = None
    status: str
    mentor_response: str | None = None
    responded_at: datetime | None = None
    created_at: datetime
    updated_at: datetime
    student: UserSummary
    mentor: UserSummary


# Resignation Requests
class ResignationRequestCreate(CamelModel):
    mentor_id: int
    classroom_id: int
    reason: str = Field(..., min_length=1)
    last_work_date: datetime


class ResignationRequestStatusUpdate(CamelModel):
    status: RequestStatus
    reviewed_by: int | None = None
    master_notes: str | None = None


class ResignationRequestSchema(ReviewFields):
    mentor_id: int
    classroom_id: int
    reason: str
    last_work_date: datetime
    master_notes: str | None = None
    classroom: ClassroomSummary
