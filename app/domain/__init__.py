"""Domain layer: value objects and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.exceptions import (
    CascadeIncompleteException,
    EventHubException,
    FieldError,
    ForeignKeyViolationException,
    PersistenceException,
    ResourceNotFoundException,
    ValidationException,
)
from app.domain.value_objects import (
    ContactEmail,
    EventDate,
    RequiredText,
    TicketPrice,
    TicketQuantity,
)

__all__ = [
    # Exceptions
    "CascadeIncompleteException",
    "EventHubException",
    "FieldError",
    "ForeignKeyViolationException",
    "PersistenceException",
    "ResourceNotFoundException",
    "ValidationException",
    # Value objects
    "ContactEmail",
    "EventDate",
    "RequiredText",
    "TicketPrice",
    "TicketQuantity",
]
