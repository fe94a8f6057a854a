"""API v1 router aggregation.

Includes the resource endpoint modules with consistent prefix and tags. All
routes use dependencies from app.api.v1.dependencies (no manual repo/service
construction). Health routes are mounted by main outside API_PREFIX.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import events, organizations, tickets

api_router = APIRouter()

api_router.include_router(
    organizations.router, prefix="/organizations", tags=["organizations"]
)
api_router.include_router(events.router, prefix="/events", tags=["events"])
api_router.include_router(tickets.router, prefix="/tickets", tags=["tickets"])
