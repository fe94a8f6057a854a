"""Ticket API: thin routes delegating to TicketService."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from app.api.v1.dependencies import get_ticket_service, get_ticket_service_for_write
from app.application.dtos.ticket import TicketCreate, TicketPatch
from app.application.use_cases.tickets import TicketService
from app.schemas.common import ErrorResponse
from app.schemas.ticket import TicketCreateRequest, TicketResponse, TicketUpdateRequest

router = APIRouter()

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Ticket not found"}}
_INVALID = {400: {"model": ErrorResponse, "description": "Validation or foreign-key failure"}}


@router.get("", response_model=list[TicketResponse])
async def list_tickets(
    service: Annotated[TicketService, Depends(get_ticket_service)],
):
    items = await service.list_tickets()
    return [TicketResponse.model_validate(t) for t in items]


@router.get("/{ticket_id}", response_model=TicketResponse, responses=_NOT_FOUND)
async def get_ticket(
    ticket_id: str,
    service: Annotated[TicketService, Depends(get_ticket_service)],
):
    ticket = await service.get_ticket(ticket_id)
    return TicketResponse.model_validate(ticket)


@router.post("", response_model=TicketResponse, status_code=201, responses=_INVALID)
async def create_ticket(
    body: TicketCreateRequest,
    service: Annotated[TicketService, Depends(get_ticket_service_for_write)],
):
    """Create a ticket under an existing event."""
    created = await service.create_ticket(
        TicketCreate(
            event_id=body.event_id,
            type=body.type,
            price=body.price,
            quantity_available=body.quantity_available,
        )
    )
    return TicketResponse.model_validate(created)


@router.put("/{ticket_id}", response_model=TicketResponse, responses={**_NOT_FOUND, **_INVALID})
async def update_ticket(
    ticket_id: str,
    body: TicketUpdateRequest,
    service: Annotated[TicketService, Depends(get_ticket_service_for_write)],
):
    """Update a ticket (partial). A new event_id must reference an existing event."""
    patch = TicketPatch(**body.model_dump(exclude_unset=True))
    updated = await service.update_ticket(ticket_id, patch)
    return TicketResponse.model_validate(updated)


@router.delete("/{ticket_id}", status_code=204, responses=_NOT_FOUND)
async def delete_ticket(
    ticket_id: str,
    service: Annotated[TicketService, Depends(get_ticket_service_for_write)],
) -> Response:
    await service.delete_ticket(ticket_id)
    return Response(status_code=204)
