"""
Platform Errors

Typed failures raised by the data-access layer. Each error carries an
``ErrorKind`` and the kind alone decides the HTTP status the API returns.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Failure categories surfaced to API clients."""

    NOT_FOUND = "not_found"
    VALIDATION_FAILED = "validation_failed"
    CONFLICT = "conflict"
    BACKEND = "backend"

    @property
    def http_status(self) -> int:
        return _STATUS_BY_KIND[self]


_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION_FAILED: 400,
    ErrorKind.CONFLICT: 409,
    ErrorKind.BACKEND: 500,
}


class PlatformError(Exception):
    """Base class for all errors the API maps to a structured response."""

    kind: ErrorKind = ErrorKind.BACKEND

    def __init__(self, message: str, details: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or []

    @property
    def http_status(self) -> int:
        return self.kind.http_status

    def to_response(self) -> dict[str, Any]:
        """JSON body for this error."""
        body: dict[str, Any] = {"error": self.message, "kind": self.kind.value}
        if self.details:
            body["details"] = self.details
        return body


class NotFoundError(PlatformError):
    """Lookup, update or delete targeted a row that does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity: str, key: Any) -> None:
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.key = key


class ValidationFailedError(PlatformError):
    """Input did not match the declared shape.

    ``details`` holds one ``{"field", "message", "type"}`` entry per offending
    field path.
    """

    kind = ErrorKind.VALIDATION_FAILED


class ConflictError(PlatformError):
    """Uniqueness or foreign-key constraint rejected the write."""

    kind = ErrorKind.CONFLICT


class BackendError(PlatformError):
    """Database connectivity or any other unexpected storage failure."""

    kind = ErrorKind.BACKEND
