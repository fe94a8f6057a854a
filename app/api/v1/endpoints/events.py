"""Event API: thin routes delegating to EventService.

/search is declared before /{event_id} so it is not captured as an id.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response

from app.api.v1.dependencies import get_event_service, get_event_service_for_write
from app.application.dtos.event import EventCreate, EventPatch, EventSearch
from app.application.use_cases.events import EventService
from app.schemas.common import ErrorResponse
from app.schemas.event import (
    EventCreateRequest,
    EventDetailResponse,
    EventResponse,
    EventUpdateRequest,
)

router = APIRouter()

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Event not found"}}
_INVALID = {400: {"model": ErrorResponse, "description": "Validation or foreign-key failure"}}


@router.get("", response_model=list[EventResponse])
async def list_events(
    service: Annotated[EventService, Depends(get_event_service)],
):
    """List every event."""
    items = await service.list_events()
    return [EventResponse.model_validate(e) for e in items]


@router.get("/search", response_model=list[EventResponse], responses=_INVALID)
async def search_events(
    service: Annotated[EventService, Depends(get_event_service)],
    category: str | None = Query(None, max_length=100, description="Case-insensitive exact match"),
    location: str | None = Query(None, max_length=255, description="Case-insensitive substring match"),
):
    """Search events by category and/or location. No filters returns every event."""
    items = await service.search_events(EventSearch(category=category, location=location))
    return [EventResponse.model_validate(e) for e in items]


@router.get("/{event_id}", response_model=EventDetailResponse, responses=_NOT_FOUND)
async def get_event(
    event_id: str,
    service: Annotated[EventService, Depends(get_event_service)],
):
    """Get an event with its tickets."""
    event = await service.get_event_with_tickets(event_id)
    return EventDetailResponse.model_validate(event)


@router.post("", response_model=EventResponse, status_code=201, responses=_INVALID)
async def create_event(
    body: EventCreateRequest,
    service: Annotated[EventService, Depends(get_event_service_for_write)],
):
    """Create an event under an existing organization."""
    created = await service.create_event(
        EventCreate(
            org_id=body.org_id,
            name=body.name,
            description=body.description,
            date=body.date,
            location=body.location,
            category=body.category,
        )
    )
    return EventResponse.model_validate(created)


@router.put("/{event_id}", response_model=EventResponse, responses={**_NOT_FOUND, **_INVALID})
async def update_event(
    event_id: str,
    body: EventUpdateRequest,
    service: Annotated[EventService, Depends(get_event_service_for_write)],
):
    """Update an event (partial). A new org_id must reference an existing organization."""
    patch = EventPatch(**body.model_dump(exclude_unset=True))
    updated = await service.update_event(event_id, patch)
    return EventResponse.model_validate(updated)


@router.delete("/{event_id}", status_code=204, responses=_NOT_FOUND)
async def delete_event(
    event_id: str,
    service: Annotated[EventService, Depends(get_event_service_for_write)],
) -> Response:
    """Delete an event with all its tickets."""
    await service.delete_event(event_id)
    return Response(status_code=204)
