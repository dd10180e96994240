from django.urls import path

from ticketing.handlers import (
    EventDetailView,
    EventListView,
    EventTicketsView,
    TicketMetadataView,
    TicketOwnerView,
    TicketTransferView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/tickets",
        EventTicketsView.as_view(),
        name="event-tickets",
    ),
    path(
        "tickets/<str:ticket_id>/owner",
        TicketOwnerView.as_view(),
        name="ticket-owner",
    ),
    path(
        "tickets/<str:ticket_id>/metadata",
        TicketMetadataView.as_view(),
        name="ticket-metadata",
    ),
    path(
        "tickets/<str:ticket_id>/transfer",
        TicketTransferView.as_view(),
        name="ticket-transfer",
    ),
]
