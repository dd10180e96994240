from ticketing.domain.models import Attribute, Event, Ticket, TicketMetadata
from ticketing.domain.value_objects import Capacity, EventId, Identity, SeatNumber, TicketId

__all__ = [
    "Event",
    "Ticket",
    "TicketMetadata",
    "Attribute",
    "EventId",
    "TicketId",
    "SeatNumber",
    "Capacity",
    "Identity",
]
