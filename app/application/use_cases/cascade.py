"""Cascading deletes across the organization -> event -> ticket hierarchy.

Children go first (tickets, then events, then the parent) and the caller's
transaction makes the whole sequence atomic. After deleting, remaining
children are counted; any leftover raises CascadeIncompleteException so the
transaction rolls back instead of committing a half-finished delete.
"""

from __future__ import annotations

import logging

from app.application.dtos.cascade import CascadeResult
from app.application.interfaces.repositories import (
    IEventRepository,
    IOrganizationRepository,
    ITicketRepository,
)
from app.domain.exceptions import CascadeIncompleteException, ResourceNotFoundException
from app.shared.telemetry import add_span_attributes, traced

logger = logging.getLogger(__name__)


@traced("cascade.delete_event")
async def cascade_delete_event(
    event_repo: IEventRepository,
    ticket_repo: ITicketRepository,
    *,
    event_id: str,
) -> CascadeResult:
    """Delete an event and every ticket it owns. Raises ResourceNotFoundException if absent."""
    if not await event_repo.exists(event_id):
        raise ResourceNotFoundException("Event", event_id)

    tickets = await ticket_repo.delete_by_event_ids([event_id])
    remaining = await ticket_repo.count_by_event_ids([event_id])
    if remaining:
        raise CascadeIncompleteException("Event", event_id, {"tickets": remaining})

    events = await event_repo.delete_by_id(event_id)
    if events != 1:
        raise CascadeIncompleteException("Event", event_id, {"events": 1 - events})

    add_span_attributes(tickets_deleted=tickets)
    logger.info("Deleted event %s with %d ticket(s)", event_id, tickets)
    return CascadeResult(events=events, tickets=tickets)


@traced("cascade.delete_organization")
async def cascade_delete_organization(
    org_repo: IOrganizationRepository,
    event_repo: IEventRepository,
    ticket_repo: ITicketRepository,
    *,
    org_id: str,
) -> CascadeResult:
    """Delete an organization, its events and their tickets.

    Raises ResourceNotFoundException if the organization does not exist.
    """
    if not await org_repo.exists(org_id):
        raise ResourceNotFoundException("Organization", org_id)

    event_ids = await event_repo.ids_by_org(org_id)
    tickets = await ticket_repo.delete_by_event_ids(event_ids)
    events = await event_repo.delete_by_org(org_id)

    leftover: dict[str, int] = {}
    ticket_count = await ticket_repo.count_by_event_ids(event_ids)
    if ticket_count:
        leftover["tickets"] = ticket_count
    event_count = await event_repo.count_by_org(org_id)
    if event_count:
        leftover["events"] = event_count
    if leftover:
        raise CascadeIncompleteException("Organization", org_id, leftover)

    organizations = await org_repo.delete_by_id(org_id)
    if organizations != 1:
        raise CascadeIncompleteException(
            "Organization", org_id, {"organizations": 1 - organizations}
        )

    add_span_attributes(events_deleted=events, tickets_deleted=tickets)
    logger.info(
        "Deleted organization %s with %d event(s) and %d ticket(s)",
        org_id,
        events,
        tickets,
    )
    return CascadeResult(organizations=organizations, events=events, tickets=tickets)
