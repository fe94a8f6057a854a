"""Domain value objects for the EventHub application.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value. Constructors raise
ValueError; the application validators turn those into field errors.
"""

import math
import re
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, ClassVar


def _require_text(value: Any, field_name: str) -> str:
    """Return value if it is a string with visible characters. Raises ValueError otherwise."""
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string")
    if not value.strip():
        raise ValueError(f"{field_name} cannot be empty")
    return value


@dataclass(frozen=True)
class RequiredText:
    """Non-empty free text (names, descriptions, locations, categories, ticket types)."""

    value: str
    field_name: str = "Value"

    def __post_init__(self) -> None:
        _require_text(self.value, self.field_name)


@dataclass(frozen=True)
class ContactEmail:
    """Organization contact email with standard address syntax.

    local@domain.tld; no whitespace, exactly one '@', dotted domain with
    an alphabetic top-level label.
    """

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"^[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+"
        r"@[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
        r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?)*"
        r"\.[A-Za-z]{2,63}$"
    )
    MAX_LENGTH: ClassVar[int] = 254

    def __post_init__(self) -> None:
        _require_text(self.value, "Contact email")
        if len(self.value) > self.MAX_LENGTH or not self.PATTERN.match(self.value):
            raise ValueError("Invalid email format")
        local = self.value.split("@", 1)[0]
        if local.startswith(".") or local.endswith(".") or ".." in local:
            raise ValueError("Invalid email format")


@dataclass(frozen=True)
class EventDate:
    """Calendar date of an event.

    Accepts a date, a datetime (date part kept) or an ISO 8601 string
    ('2024-11-15' or '2024-11-15T18:00:00').
    """

    value: date

    @classmethod
    def parse(cls, raw: Any) -> "EventDate":
        """Build from raw input. Raises ValueError for anything that is not a real calendar date."""
        if isinstance(raw, datetime):
            return cls(raw.date())
        if isinstance(raw, date):
            return cls(raw)
        if not isinstance(raw, str) or not raw.strip():
            raise ValueError("Date is required")
        text = raw.strip()
        try:
            if len(text) == 10:
                return cls(date.fromisoformat(text))
            return cls(datetime.fromisoformat(text.replace("Z", "+00:00")).date())
        except ValueError as e:
            raise ValueError("Invalid date format") from e


@dataclass(frozen=True)
class TicketPrice:
    """Non-negative ticket price."""

    value: float

    @classmethod
    def parse(cls, raw: Any) -> "TicketPrice":
        """Build from int, float, Decimal or numeric string. Raises ValueError otherwise."""
        if isinstance(raw, bool) or raw is None:
            raise ValueError("Price must be a number")
        try:
            amount = float(Decimal(str(raw).strip()))
        except (InvalidOperation, ValueError) as e:
            raise ValueError("Price must be a number") from e
        return cls(amount)

    def __post_init__(self) -> None:
        if math.isnan(self.value) or math.isinf(self.value):
            raise ValueError("Price must be a number")
        if self.value < 0:
            raise ValueError("Price must be non-negative")


# Largest value a 32-bit signed INTEGER column stores (Postgres integer).
MAX_TICKET_QUANTITY = 2_147_483_647


@dataclass(frozen=True)
class TicketQuantity:
    """Non-negative integer count of tickets available."""

    value: int

    @classmethod
    def parse(cls, raw: Any) -> "TicketQuantity":
        """Build from an int or an integer string. Floats with a fraction are rejected."""
        if isinstance(raw, bool) or raw is None:
            raise ValueError("Quantity must be an integer")
        if isinstance(raw, int):
            return cls(raw)
        if isinstance(raw, float):
            if not raw.is_integer():
                raise ValueError("Quantity must be an integer")
            return cls(int(raw))
        if isinstance(raw, str) and re.fullmatch(r"\s*-?\d+\s*", raw):
            return cls(int(raw))
        raise ValueError("Quantity must be an integer")

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Quantity must be non-negative")
        if self.value > MAX_TICKET_QUANTITY:
            raise ValueError(f"Quantity must be at most {MAX_TICKET_QUANTITY}")
