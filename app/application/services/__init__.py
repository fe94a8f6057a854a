"""Application services: field validation shared by every write path."""

from app.application.services.field_validators import (
    public_field_name,
    validate_event,
    validate_organization,
    validate_ticket,
)

__all__ = [
    "public_field_name",
    "validate_event",
    "validate_organization",
    "validate_ticket",
]
