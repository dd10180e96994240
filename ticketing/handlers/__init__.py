from ticketing.handlers.views import (
    EventDetailView,
    EventListView,
    EventTicketsView,
    TicketMetadataView,
    TicketOwnerView,
    TicketTransferView,
)

__all__ = [
    "EventListView",
    "EventDetailView",
    "EventTicketsView",
    "TicketOwnerView",
    "TicketMetadataView",
    "TicketTransferView",
]
