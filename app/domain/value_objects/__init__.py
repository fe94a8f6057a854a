"""Domain value objects and shared value types."""

from app.domain.value_objects.core import (
    ContactEmail,
    EventDate,
    RequiredText,
    TicketPrice,
    TicketQuantity,
)

__all__ = [
    "ContactEmail",
    "EventDate",
    "RequiredText",
    "TicketPrice",
    "TicketQuantity",
]
