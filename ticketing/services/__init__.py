from ticketing.services.context import (
    CallerContext,
    Clock,
    FixedClock,
    StaticCallerContext,
    SystemClock,
)
from ticketing.services.event_service import EventService
from ticketing.services.ownership_service import OwnershipService
from ticketing.services.ticket_service import TicketService

__all__ = [
    "EventService",
    "TicketService",
    "OwnershipService",
    "Clock",
    "SystemClock",
    "FixedClock",
    "CallerContext",
    "StaticCallerContext",
]
