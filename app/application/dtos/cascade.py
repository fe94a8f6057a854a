"""DTOs for cascading deletes."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CascadeResult:
    """Rows removed by one cascading delete (all inside one transaction)."""

    organizations: int = 0
    events: int = 0
    tickets: int = 0
