"""
HarmonyLearn SQLAlchemy Models
"""

from .base import Base, IntegerPrimaryKeyMixin, TimestampMixin
from .classrooms import Classroom, ClassroomMembership, LiveSession, Schedule, ScheduleEnrollment
from .community import Post, PostComment
from .courses import Course, CourseReview, Enrollment, Lesson
from .mentorship import MentorConversation, MentorshipSession
from .requests import (
    REQUEST_STATUSES,
    MasterRoleRequest,
    MentorshipRequest,
    ResignationRequest,
    StaffRequest,
)
from .users import MentorProfile, User

__all__ = [
    # Base
    "Base",
    "IntegerPrimaryKeyMixin",
    "TimestampMixin",
    # Users
    "User",
    "MentorProfile",
    # Courses
    "Course",
    "Lesson",
    "CourseReview",
    "Enrollment",
    # Classrooms
    "Classroom",
    "ClassroomMembership",
    "LiveSession",
    "Schedule",
    "ScheduleEnrollment",
    # Requests
    "REQUEST_STATUSES",
    "StaffRequest",
    "MasterRoleRequest",
    "MentorshipRequest",
    "ResignationRequest",
    # Mentorship
    "MentorConversation",
    "MentorshipSession",
    # Community
    "Post",
    "PostComment",
]
