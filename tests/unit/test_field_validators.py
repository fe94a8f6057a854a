"""Field validation run before every organization/event/ticket write."""

from datetime import date

import pytest

from app.application.services.field_validators import (
    validate_event,
    validate_organization,
    validate_ticket,
)
from app.domain.exceptions import FieldError, ValidationException


def _fields(exc: ValidationException) -> dict[str, str]:
    return {e.field: e.message for e in exc.errors}


def test_organization_valid_input_passes_through() -> None:
    cleaned = validate_organization(
        {
            "name": "Arts Collective",
            "description": "Supporting local artists",
            "contact_email": "info@artscollective.org",
        }
    )
    assert cleaned == {
        "name": "Arts Collective",
        "description": "Supporting local artists",
        "contact_email": "info@artscollective.org",
    }


def test_organization_reports_every_failing_field() -> None:
    """All failures are collected, not just the first; names use the JSON spelling."""
    with pytest.raises(ValidationException) as exc_info:
        validate_organization({"name": " ", "description": "", "contact_email": "nope"})
    assert _fields(exc_info.value) == {
        "name": "Name cannot be empty",
        "description": "Description cannot be empty",
        "contactEmail": "Invalid email format",
    }


def test_organization_missing_fields_are_required() -> None:
    with pytest.raises(ValidationException) as exc_info:
        validate_organization({})
    assert set(_fields(exc_info.value)) == {"name", "description", "contactEmail"}


def test_organization_partial_checks_only_supplied_keys() -> None:
    assert validate_organization({"name": "Renamed"}, partial=True) == {"name": "Renamed"}
    assert validate_organization({}, partial=True) == {}


def test_organization_partial_still_rejects_bad_values() -> None:
    with pytest.raises(ValidationException) as exc_info:
        validate_organization({"contact_email": "bad@"}, partial=True)
    assert exc_info.value.errors == [FieldError("contactEmail", "Invalid email format")]


def test_event_date_is_normalized_to_calendar_date() -> None:
    cleaned = validate_event(
        {
            "org_id": "org1",
            "name": "AI Workshop",
            "description": "Hands-on AI workshop",
            "date": "2024-12-01",
            "location": "Tech United HQ",
            "category": "Technology",
        }
    )
    assert cleaned["date"] == date(2024, 12, 1)


def test_event_invalid_date_rejected() -> None:
    with pytest.raises(ValidationException) as exc_info:
        validate_event({"date": "2024-13-45"}, partial=True)
    assert _fields(exc_info.value) == {"date": "Invalid date format"}


def test_event_empty_category_and_location_rejected() -> None:
    with pytest.raises(ValidationException) as exc_info:
        validate_event({"category": "", "location": "  "}, partial=True)
    assert set(_fields(exc_info.value)) == {"category", "location"}


def test_ticket_price_zero_accepted_and_negative_rejected() -> None:
    assert validate_ticket({"price": 0}, partial=True) == {"price": 0.0}
    with pytest.raises(ValidationException) as exc_info:
        validate_ticket({"price": -1}, partial=True)
    assert _fields(exc_info.value) == {"price": "Price must be non-negative"}


def test_ticket_malformed_numbers_are_validation_errors() -> None:
    with pytest.raises(ValidationException) as exc_info:
        validate_ticket(
            {"event_id": "ev1", "type": "VIP", "price": "abc", "quantity_available": "1.5"}
        )
    assert _fields(exc_info.value) == {
        "price": "Price must be a number",
        "quantityAvailable": "Quantity must be an integer",
    }


def test_ticket_numeric_strings_are_normalized() -> None:
    cleaned = validate_ticket(
        {"event_id": "ev1", "type": "VIP", "price": "250", "quantity_available": "20"}
    )
    assert cleaned["price"] == 250.0
    assert cleaned["quantity_available"] == 20
