"""
HarmonyLearn data-access layer.

Every operation takes the request-scoped AsyncSession as its first argument
and commits its own transaction. Lookups return None for missing rows;
updates and deletes raise NotFoundError.
"""

from .classrooms import (
    create_classroom,
    create_live_session,
    create_membership,
    delete_classroom,
    delete_live_session,
    delete_membership,
    get_classroom_analytics,
    get_classroom_by_id,
    get_classroom_by_slug,
    get_live_session_by_id,
    get_membership_by_id,
    get_staff_classroom_info,
    list_classrooms,
    list_live_sessions,
    list_memberships,
    update_classroom,
    update_live_session,
    update_membership,
)
from .courses import (
    create_course,
    create_enrollment,
    create_lesson,
    create_review,
    delete_course,
    delete_enrollment,
    get_course_by_id,
    get_enrollment_by_id,
    list_courses,
    list_enrollments,
    list_enrollments_by_course,
    list_enrollments_by_user,
    update_course,
    update_enrollment,
)
from .health import ping
from .mentorship import (
    create_mentor_conversation,
    create_mentorship_session,
    get_mentorship_session_by_id,
    list_mentor_conversations,
    list_mentorship_sessions,
    mark_conversation_read,
    update_mentorship_session,
)
from .posts import (
    create_post,
    create_post_comment,
    delete_post,
    get_post_by_id,
    list_posts,
    update_post,
)
from .requests import (
    create_master_role_request,
    create_mentorship_request,
    create_resignation_request,
    create_staff_request,
    delete_master_role_request,
    delete_mentorship_request,
    delete_staff_request,
    get_master_role_request_by_id,
    get_mentorship_request_by_id,
    get_resignation_request_by_id,
    get_staff_request_by_id,
    list_master_role_requests,
    list_mentorship_requests,
    list_resignation_requests,
    list_staff_requests,
    update_master_role_request,
    update_mentorship_request,
    update_resignation_request,
    update_staff_request,
)
from .schedules import (
    create_schedule,
    delete_schedule,
    get_schedule_by_id,
    list_schedules,
    update_schedule,
)
from .users import (
    create_mentor_profile,
    create_user,
    delete_mentor_profile,
    delete_user,
    get_mentor_profile_by_id,
    get_mentor_profile_by_user_id,
    get_user_by_email,
    get_user_by_id,
    get_user_by_username,
    list_mentor_profiles,
    list_users,
    update_mentor_profile,
    update_user,
)

__all__ = [
    # Health
    "ping",
    # Users
    "list_users",
    "get_user_by_id",
    "get_user_by_username",
    "get_user_by_email",
    "create_user",
    "update_user",
    "delete_user",
    "list_mentor_profiles",
    "get_mentor_profile_by_id",
    "get_mentor_profile_by_user_id",
    "create_mentor_profile",
    "update_mentor_profile",
    "delete_mentor_profile",
    # Courses
    "list_courses",
    "get_course_by_id",
    "create_course",
    "update_course",
    "delete_course",
    "create_lesson",
    "create_review",
    "list_enrollments",
    "get_enrollment_by_id",
    "list_enrollments_by_user",
    "list_enrollments_by_course",
    "create_enrollment",
    "update_enrollment",
    "delete_enrollment",
    # Classrooms
    "list_classrooms",
    "get_classroom_by_id",
    "get_classroom_by_slug",
    "create_classroom",
    "update_classroom",
    "delete_classroom",
    "get_classroom_analytics",
    "list_memberships",
    "get_membership_by_id",
    "create_membership",
    "update_membership",
    "delete_membership",
    "get_staff_classroom_info",
    "list_live_sessions",
    "get_live_session_by_id",
    "create_live_session",
    "update_live_session",
    "delete_live_session",
    # Schedules
    "list_schedules",
    "get_schedule_by_id",
    "create_schedule",
    "update_schedule",
    "delete_schedule",
    # Posts
    "list_posts",
    "get_post_by_id",
    "create_post",
    "update_post",
    "delete_post",
    "create_post_comment",
    # Requests
    "list_staff_requests",
    "get_staff_request_by_id",
    "create_staff_request",
    "update_staff_request",
    "delete_staff_request",
    "list_master_role_requests",
    "get_master_role_request_by_id",
    "create_master_role_request",
    "update_master_role_request",
    "delete_master_role_request",
    "list_mentorship_requests",
    "get_mentorship_request_by_id",
    "create_mentorship_request",
    "update_mentorship_request",
    "delete_mentorship_request",
    "list_resignation_requests",
    "get_resignation_request_by_id",
    "create_resignation_request",
    "update_resignation_request",
    # Mentorship
    "list_mentor_conversations",
    "create_mentor_conversation",
    "mark_conversation_read",
    "list_mentorship_sessions",
    "get_mentorship_session_by_id",
    "create_mentorship_session",
    "update_mentorship_session",
]
