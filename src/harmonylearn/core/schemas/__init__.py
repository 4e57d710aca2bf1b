"""Pydantic schemas for API validation."""

from .classrooms import (
    ClassroomAnalytics,
    ClassroomCreate,
    ClassroomDetail,
    ClassroomMember,
    ClassroomSchema,
    ClassroomUpdate,
    LiveSessionCreate,
    LiveSessionSchema,
    LiveSessionUpdate,
    MembershipCreate,
    MembershipSchema,
    MembershipUpdate,
    ScheduleCreate,
    ScheduleSchema,
    ScheduleUpdate,
    StaffClassroomInfo,
)
from .common import CamelModel, MessageResponse
from .courses import (
    CourseCreate,
    CourseDetail,
    CourseSchema,
    CourseUpdate,
    EnrollmentCreate,
    EnrollmentSchema,
    EnrollmentUpdate,
    LessonCreate,
    LessonSchema,
    ReviewCreate,
    ReviewSchema,
)
from .mentorship import (
    ConversationCreate,
    ConversationSchema,
    MentorshipRequestDetail,
    MentorshipSessionCreate,
    MentorshipSessionSchema,
    MentorshipSessionUpdate,
)
from .posts import CommentCreate, CommentSchema, PostCreate, PostSchema, PostUpdate
from .requests import (
    MasterRoleRequestCreate,
    MasterRoleRequestSchema,
    MasterRoleRequestStatusUpdate,
    MentorshipRequestCreate,
    MentorshipRequestSchema,
    MentorshipRequestUpdate,
    ResignationRequestCreate,
    ResignationRequestSchema,
    ResignationRequestStatusUpdate,
    StaffRequestCreate,
    StaffRequestSchema,
    StaffRequestStatusUpdate,
)
from .users import (
    AuthResponse,
    MentorProfileCreate,
    MentorProfileRead,
    MentorProfileUpdate,
    UserCreate,
    UserDetail,
    UserSchema,
    UserUpdate,
)

__all__ = [
    # Common
    "CamelModel",
    "MessageResponse",
    # Users
    "UserCreate",
    "UserUpdate",
    "UserSchema",
    "UserDetail",
    "AuthResponse",
    "MentorProfileCreate",
    "MentorProfileUpdate",
    "MentorProfileRead",
    # Courses
    "CourseCreate",
    "CourseUpdate",
    "CourseSchema",
    "CourseDetail",
    "LessonCreate",
    "LessonSchema",
    "ReviewCreate",
    "ReviewSchema",
    "EnrollmentCreate",
    "EnrollmentUpdate",
    "EnrollmentSchema",
    # Classrooms
    "ClassroomCreate",
    "ClassroomUpdate",
    "ClassroomSchema",
    "ClassroomDetail",
    "ClassroomMember",
    "ClassroomAnalytics",
    "StaffClassroomInfo",
    "MembershipCreate",
    "MembershipUpdate",
    "MembershipSchema",
    "LiveSessionCreate",
    "LiveSessionUpdate",
    "LiveSessionSchema",
    "ScheduleCreate",
    "ScheduleUpdate",
    "ScheduleSchema",
    # Requests
    "StaffRequestCreate",
    "StaffRequestStatusUpdate",
    "StaffRequestSchema",
    "MasterRoleRequestCreate",
    "MasterRoleRequestStatusUpdate",
    "MasterRoleRequestSchema",
    "MentorshipRequestCreate",
    "MentorshipRequestUpdate",
    "MentorshipRequestSchema",
    "MentorshipRequestDetail",
    "ResignationRequestCreate",
    "ResignationRequestStatusUpdate",
    "ResignationRequestSchema",
    # Mentorship
    "ConversationCreate",
    "ConversationSchema",
    "MentorshipSessionCreate",
    "MentorshipSessionUpdate",
    "MentorshipSessionSchema",
    # Posts
    "PostCreate",
    "PostUpdate",
    "PostSchema",
    "CommentCreate",
    "CommentSchema",
]
