"""Domain exceptions for the EventHub application.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class FieldError:
    """A single failing field and its message (one entry of a validation report)."""

    field: str
    message: str


class EventHubException(Exception):
    """Base exception for all EventHub application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. resource_type, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used by the exception handlers."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(EventHubException):
    """Raised when one or more fields fail validation.

    Carries every failing field so callers get a full report instead of the
    first failure only.
    """

    def __init__(
        self,
        errors: list[FieldError] | None = None,
        message: str = "Validation failed",
        field: str | None = None,
    ) -> None:
        """Initialize with field errors or a single message/field pair.

        Args:
            errors: Failing fields with their messages.
            message: Summary message; also used as the field message when
                only ``field`` is given.
            field: Convenience for a single failing field.
        """
        collected = list(errors or [])
        if field and not collected:
            collected.append(FieldError(field=field, message=message))
        self.errors = collected
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)

    def to_dict(self) -> dict[str, Any]:
        body = super().to_dict()
        body["errors"] = [asdict(e) for e in self.errors]
        return body


class ResourceNotFoundException(EventHubException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'Organization', 'Event').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class ForeignKeyViolationException(EventHubException):
    """Raised when a child references a parent that does not exist.

    Kept apart from ValidationException so callers can tell a malformed
    field from a dangling reference.
    """

    def __init__(self, field: str, parent_type: str, parent_id: str) -> None:
        """Initialize with the referencing field and the missing parent.

        Args:
            field: Foreign key field on the child (e.g. 'org_id').
            parent_type: Parent resource type (e.g. 'Organization').
            parent_id: The referenced id that was not found.
        """
        self.errors = [
            FieldError(field=field, message=f"{parent_type} {parent_id} does not exist")
        ]
        super().__init__(
            f"Referenced {parent_type} does not exist",
            "FOREIGN_KEY_VIOLATION",
            {"field": field, "parent_type": parent_type, "parent_id": parent_id},
        )

    def to_dict(self) -> dict[str, Any]:
        body = super().to_dict()
        body["errors"] = [asdict(e) for e in self.errors]
        return body


class CascadeIncompleteException(EventHubException):
    """Raised when a cascading delete left dependent rows behind.

    The surrounding transaction is rolled back; the caller sees a
    degraded-consistency error instead of a successful delete.
    """

    def __init__(self, resource_type: str, resource_id: str, remaining: dict[str, int]) -> None:
        """Initialize with the parent being deleted and leftover row counts.

        Args:
            resource_type: Parent resource type whose delete was attempted.
            resource_id: Parent id.
            remaining: Child table name to number of rows still present.
        """
        super().__init__(
            f"Cascading delete of {resource_type} did not complete; no changes were applied",
            "CASCADE_INCOMPLETE",
            {
                "resource_type": resource_type,
                "resource_id": resource_id,
                "remaining": remaining,
            },
        )


class PersistenceException(EventHubException):
    """Raised (or synthesized by handlers) when the database engine fails.

    The message is deliberately generic; engine text is only logged.
    """

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(message, "PERSISTENCE_ERROR")
