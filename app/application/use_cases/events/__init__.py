"""Event use cases."""

from app.application.use_cases.events.event_operations import EventService

__all__ = ["EventService"]
