"""Ticket use cases."""

from app.application.use_cases.tickets.ticket_operations import TicketService

__all__ = ["TicketService"]
