"""
Shared Schema Building Blocks

camelCase wire format, nested summaries embedded in responses, and the
enumerations reused across resources.
"""

from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

UserRole = Literal["student", "mentor", "master", "admin"]
RequestStatus = Literal["pending", "approved", "rejected"]
MembershipRole = Literal["student", "staff"]
ActiveStatus = Literal["active", "inactive"]


class CamelModel(BaseModel):
    """Base schema: camelCase JSON keys, snake_case accepted on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PartialUpdate(CamelModel):
    """
    Base for PATCH bodies. Omitted fields are left untouched.

    An explicit null is only accepted for the fields named in
    ``nullable_fields``; every other field must carry a value when sent.
    """

    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    @field_validator("*")
    @classmethod
    def reject_null(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None and info.field_name not in cls.nullable_fields:
            raise ValueError("Field may not be null")
        return v


class MessageResponse(CamelModel):
    message: str


# Embedded summaries
class UserSummary(CamelModel):
    """Public identity of a related user."""

    id: int
    username: str
    first_name: str | None = None
    last_name: str | None = None


class UserRoleSummary(UserSummary):
    role: str


class UserAvatarSummary(UserSummary):
    avatar: str | None = None


class ClassroomSummary(CamelModel):
    id: int
    title: str
    academy_name: str | None = None


class CourseSummary(CamelModel):
    id: int
    title: str
    category: str
    level: str
