"""
Input validation functions for HarmonyLearn.

Field validators follow the pattern:
1. Accept raw user input
2. Normalize/clean the input
3. Validate against business rules
4. Return cleaned value or raise InvalidFieldError

InvalidFieldError subclasses ValueError so the validators can be used
directly inside Pydantic schemas. ``validate_payload`` is the entry point the
data-access layer uses to turn an untyped mapping into a schema instance.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationFailedError

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class InvalidFieldError(ValueError):
    """Raised when a single field fails validation."""

    pass


# ============================================================================
# Payload Validation
# ============================================================================


def error_details(exc: PydanticValidationError) -> list[dict[str, Any]]:
    """Flatten Pydantic errors into ``{field, message, type}`` entries."""
    return [
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]


def validate_payload(schema: type[SchemaT], data: SchemaT | Mapping[str, Any]) -> SchemaT:
    """
    Normalize untyped input into ``schema`` with declared defaults applied.

    Args:
        schema: Pydantic model describing the accepted shape
        data: Raw mapping (camelCase or snake_case keys) or an instance of schema

    Returns:
        Validated schema instance

    Raises:
        ValidationFailedError: Listing every offending field path
    """
    if isinstance(data, schema):
        return data

    try:
        if isinstance(data, BaseModel):
            return schema.model_validate(data.model_dump(exclude_unset=True))
        return schema.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationFailedError(
            f"Invalid {schema.__name__} data", details=error_details(e)
        ) from e


# ============================================================================
# Username / Password
# ============================================================================

USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")
BCRYPT_MAX_BYTES = 72


def validate_username(username: str) -> str:
    """
    Validate a username.

    Usernames are 3-50 characters of letters, digits, ``_``, ``.`` or ``-``.
    Surrounding whitespace is stripped.
    """
    cleaned = username.strip()

    if len(cleaned) < 3:
        raise InvalidFieldError("Username must be at least 3 characters")

    if len(cleaned) > 50:
        raise InvalidFieldError("Username cannot exceed 50 characters")

    if not USERNAME_PATTERN.match(cleaned):
        raise InvalidFieldError(
            "Username may only contain letters, digits, underscores, dots and dashes"
        )

    return cleaned


def validate_password(password: str) -> str:
    """Validate a plaintext password before hashing.

    bcrypt only considers the first 72 bytes, so longer input is rejected
    instead of being silently truncated.
    """
    if len(password) < 6:
        raise InvalidFieldError("Password must be at least 6 characters")

    if len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
        raise InvalidFieldError(f"Password cannot exceed {BCRYPT_MAX_BYTES} bytes")

    return password


_email_adapter = TypeAdapter(EmailStr)


def normalize_email(email: str) -> str:
    """
    Normalize an address the way ``EmailStr`` does when an account is stored.

    The domain is lowercased; the local part is kept as written. Input that
    is not a valid address is returned stripped but otherwise unchanged.
    """
    cleaned = email.strip()
    try:
        return _email_adapter.validate_python(cleaned)
    except PydanticValidationError:
        return cleaned


# ============================================================================
# Classroom Branding
# ============================================================================

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
HEX_COLOR_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")


def validate_slug(slug: str) -> str:
    """
    Validate and normalize a public classroom slug.

    Normalizes to lowercase. Slugs are groups of letters and digits joined by
    single dashes, e.g. ``piano-academy``.
    """
    cleaned = slug.strip().lower()

    if not cleaned:
        raise InvalidFieldError("Slug cannot be empty")

    if len(cleaned) > 100:
        raise InvalidFieldError("Slug cannot exceed 100 characters")

    if not SLUG_PATTERN.match(cleaned):
        raise InvalidFieldError(
            "Slug may only contain lowercase letters, digits and single dashes"
        )

    return cleaned


def validate_hex_color(color: str) -> str:
    """Validate a ``#RRGGBB`` color and normalize it to uppercase."""
    cleaned = color.strip()

    if not HEX_COLOR_PATTERN.match(cleaned):
        raise InvalidFieldError("Color must be a hex value like #3B82F6")

    return cleaned.upper()


# ============================================================================
# Timetable
# ============================================================================

TIME_OF_DAY_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


def validate_time_of_day(value: str) -> str:
    """
    Validate a 24-hour ``HH:MM`` time.

    Accepts a single-digit hour (``9:30``) and normalizes it to ``09:30``.
    """
    cleaned = value.strip()
    if re.match(r"^\d:\d\d$", cleaned):
        cleaned = "0" + cleaned

    if not TIME_OF_DAY_PATTERN.match(cleaned):
        raise InvalidFieldError("Time must use 24-hour HH:MM format")

    return cleaned


def validate_time_range(start_time: str, end_time: str) -> None:
    """Require ``end_time`` to fall after ``start_time`` on the same day."""
    # Zero-padded HH:MM strings compare chronologically
    if end_time <= start_time:
        raise InvalidFieldError("End time must be after start time")
