"""
Unit tests for input validation functions.
"""

import pytest

from harmonylearn.core.errors import ErrorKind, ValidationFailedError
from harmonylearn.core.schemas import (
    MasterRoleRequestCreate,
    MentorProfileUpdate,
    ScheduleCreate,
    UserCreate,
    UserUpdate,
)
from harmonylearn.core.validation import (
    InvalidFieldError,
    normalize_email,
    validate_hex_color,
    validate_password,
    validate_payload,
    validate_slug,
    validate_time_of_day,
    validate_time_range,
    validate_username,
)

# ============================================================================
# Username / Password
# ============================================================================


class TestUsernameValidation:
    def test_valid_username_is_stripped(self):
        assert validate_username("  ama.owusu  ") == "ama.owusu"

    def test_reject_too_short(self):
        with pytest.raises(InvalidFieldError, match="at least 3"):
            validate_username("ab")

    def test_reject_too_long(self):
        with pytest.raises(InvalidFieldError, match="cannot exceed 50"):
            validate_username("a" * 51)

    def test_reject_spaces(self):
        with pytest.raises(InvalidFieldError, match="may only contain"):
            validate_username("ama owusu")


class TestPasswordValidation:
    def test_valid_password(self):
        assert validate_password("secret123") == "secret123"

    def test_reject_short_password(self):
        with pytest.raises(InvalidFieldError, match="at least 6"):
            validate_password("abc")

    def test_reject_password_over_bcrypt_limit(self):
        """bcrypt ignores bytes past 72, so longer input is refused."""
        with pytest.raises(InvalidFieldError, match="72 bytes"):
            validate_password("é" * 40)


class TestNormalizeEmail:
    def test_domain_lowercased_local_part_kept(self):
        assert normalize_email(" Kwame@Example.COM ") == "Kwame@example.com"

    def test_invalid_address_passed_through(self):
        assert normalize_email("not-an-email") == "not-an-email"


# ============================================================================
# Classroom Branding
# ============================================================================


class TestSlugValidation:
    def test_normalizes_to_lowercase(self):
        assert validate_slug("Accra-Piano") == "accra-piano"

    @pytest.mark.parametrize("slug", ["", "   ", "double--dash", "-leading", "under_score"])
    def test_reject_invalid_slugs(self, slug):
        with pytest.raises(InvalidFieldError):
            validate_slug(slug)


class TestHexColorValidation:
    def test_uppercases_valid_color(self):
        assert validate_hex_color("#3b82f6") == "#3B82F6"

    @pytest.mark.parametrize("color", ["3B82F6", "#FFF", "#GGGGGG"])
    def test_reject_invalid_colors(self, color):
        with pytest.raises(InvalidFieldError, match="hex value"):
            validate_hex_color(color)


# ============================================================================
# Timetable
# ============================================================================


class TestTimeOfDayValidation:
    def test_pads_single_digit_hour(self):
        assert validate_time_of_day("9:30") == "09:30"

    def test_accepts_last_minute_of_day(self):
        assert validate_time_of_day("23:59") == "23:59"

    @pytest.mark.parametrize("value", ["24:00", "12:60", "noon", "1230"])
    def test_reject_invalid_times(self, value):
        with pytest.raises(InvalidFieldError, match="HH:MM"):
            validate_time_of_day(value)

    def test_range_requires_end_after_start(self):
        validate_time_range("09:00", "10:00")
        with pytest.raises(InvalidFieldError, match="after start"):
            validate_time_range("10:00", "10:00")


# ============================================================================
# Payload Validation
# ============================================================================


class TestValidatePayload:
    def test_accepts_camel_case_mapping(self):
        user = validate_payload(
            UserCreate,
            {
                "username": "ama",
                "email": "ama@example.com",
                "password": "secret123",
                "firstName": "Ama",
            },
        )
        assert user.first_name == "Ama"
        assert user.role == "student"
        assert user.xp == 0

    def test_returns_instance_unchanged(self):
        user = UserCreate(username="ama", email="ama@example.com", password="secret123")
        assert validate_payload(UserCreate, user) is user

    def test_lists_every_offending_field(self):
        with pytest.raises(ValidationFailedError) as exc_info:
            validate_payload(UserCreate, {"username": "a", "email": "not-an-email"})

        error = exc_info.value
        assert error.kind == ErrorKind.VALIDATION_FAILED
        fields = {detail["field"] for detail in error.details}
        assert {"username", "email", "password"} <= fields

    def test_schedule_range_checked_on_create(self):
        with pytest.raises(ValidationFailedError):
            validate_payload(
                ScheduleCreate,
                {
                    "classroomId": 1,
                    "instructorId": 1,
                    "title": "Scales",
                    "dayOfWeek": 1,
                    "startTime": "11:00",
                    "endTime": "10:00",
                },
            )

    def test_master_role_request_rejects_foreign_fields(self):
        with pytest.raises(ValidationFailedError) as exc_info:
            validate_payload(
                MasterRoleRequestCreate,
                {
                    "mentorId": 1,
                    "experience": "10 years",
                    "qualifications": "ABRSM Grade 8",
                    "motivation": "Open an academy",
                    "plannedClassrooms": "2",
                },
            )
        assert "Invalid field names" in exc_info.value.details[0]["message"]

    def test_master_role_request_ignores_empty_foreign_fields(self):
        request = validate_payload(
            MasterRoleRequestCreate,
            {
                "mentorId": 1,
                "experience": "10 years",
                "qualifications": "ABRSM Grade 8",
                "motivation": "Open an academy",
                "reason": "",
            },
        )
        assert request.mentor_id == 1


class TestPartialUpdates:
    def test_omitted_fields_are_not_set(self):
        changes = validate_payload(UserUpdate, {"bio": "Pianist"})
        assert changes.model_dump(exclude_unset=True) == {"bio": "Pianist"}

    def test_nullable_column_can_be_cleared(self):
        changes = validate_payload(UserUpdate, {"firstName": None})
        assert changes.model_dump(exclude_unset=True) == {"first_name": None}

    def test_null_rejected_for_required_column(self):
        with pytest.raises(ValidationFailedError) as exc_info:
            validate_payload(UserUpdate, {"xp": None, "role": None})

        fields = {detail["field"] for detail in exc_info.value.details}
        assert fields == {"xp", "role"}

    def test_null_rejected_for_list_column(self):
        with pytest.raises(ValidationFailedError) as exc_info:
            validate_payload(MentorProfileUpdate, {"languages": None})

        assert exc_info.value.details[0]["field"] == "languages"
        assert "may not be null" in exc_info.value.details[0]["message"]
