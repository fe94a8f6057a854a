"""Field validation for organization, event and ticket writes.

Runs before persistence on every create and update, whatever the caller
(HTTP handlers, seeding, scripts). All failing fields are collected and
raised together as one ValidationException. Field names in the report use
the public JSON names (contactEmail, quantityAvailable).
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from app.domain.exceptions import FieldError, ValidationException
from app.domain.value_objects.core import (
    ContactEmail,
    EventDate,
    RequiredText,
    TicketPrice,
    TicketQuantity,
)

_PUBLIC_FIELD_NAMES = {
    "contact_email": "contactEmail",
    "quantity_available": "quantityAvailable",
}


def public_field_name(field: str) -> str:
    """Return the JSON name of a DTO field (contact_email -> contactEmail)."""
    return _PUBLIC_FIELD_NAMES.get(field, field)


def _text(label: str) -> Callable[[Any], str]:
    def parse(raw: Any) -> str:
        return RequiredText(raw, label).value

    return parse


def _email(raw: Any) -> str:
    return ContactEmail(raw).value


def _event_date(raw: Any) -> Any:
    return EventDate.parse(raw).value


def _price(raw: Any) -> float:
    return TicketPrice.parse(raw).value


def _quantity(raw: Any) -> int:
    return TicketQuantity.parse(raw).value


_ORGANIZATION_RULES: dict[str, Callable[[Any], Any]] = {
    "name": _text("Name"),
    "description": _text("Description"),
    "contact_email": _email,
}

_EVENT_RULES: dict[str, Callable[[Any], Any]] = {
    "org_id": _text("org_id"),
    "name": _text("Name"),
    "description": _text("Description"),
    "date": _event_date,
    "location": _text("Location"),
    "category": _text("Category"),
}

_TICKET_RULES: dict[str, Callable[[Any], Any]] = {
    "event_id": _text("event_id"),
    "type": _text("Type"),
    "price": _price,
    "quantity_available": _quantity,
}

_REQUIRED_MESSAGES = {
    "contact_email": "Contact email is required",
    "quantity_available": "Quantity is required",
}


def _validate(
    rules: Mapping[str, Callable[[Any], Any]],
    values: Mapping[str, Any],
    partial: bool,
) -> dict[str, Any]:
    """Parse every governed field; raise ValidationException listing all failures.

    When partial is False every rule is mandatory; when True only supplied
    keys are checked. Keys without a rule are ignored.
    """
    errors: list[FieldError] = []
    cleaned: dict[str, Any] = {}
    for field, parse in rules.items():
        if field not in values or values[field] is None:
            if not partial:
                message = _REQUIRED_MESSAGES.get(
                    field, f"{field.replace('_', ' ').capitalize()} is required"
                )
                errors.append(FieldError(public_field_name(field), message))
            continue
        try:
            cleaned[field] = parse(values[field])
        except ValueError as e:
            errors.append(FieldError(public_field_name(field), str(e)))
    if errors:
        raise ValidationException(errors)
    return cleaned


def validate_organization(values: Mapping[str, Any], *, partial: bool = False) -> dict[str, Any]:
    """Validate name, description and contact_email."""
    return _validate(_ORGANIZATION_RULES, values, partial)


def validate_event(values: Mapping[str, Any], *, partial: bool = False) -> dict[str, Any]:
    """Validate org_id, name, description, date (calendar date), location and category."""
    return _validate(_EVENT_RULES, values, partial)


def validate_ticket(values: Mapping[str, Any], *, partial: bool = False) -> dict[str, Any]:
    """Validate event_id, type, price (>= 0) and quantity_available (integer >= 0)."""
    return _validate(_TICKET_RULES, values, partial)
