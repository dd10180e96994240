"""Projection of a minted ticket into its display descriptor."""

from ticketing.domain.models import Attribute, Event, Ticket, TicketMetadata

TICKET_TITLE = "Event Ticket"
DEFAULT_IMAGE_REFERENCE = "image_url_or_data_uri"


def project(
    event: Event,
    ticket: Ticket,
    image_reference: str = DEFAULT_IMAGE_REFERENCE,
) -> TicketMetadata:
    """Build the display descriptor for ``ticket`` from its ``event``.

    The result is regenerated from scratch on every call and carries a
    snapshot of the current owner.
    """
    return TicketMetadata(
        token_id=ticket.id,
        owner=ticket.owner,
        title=TICKET_TITLE,
        description=f"Ticket for {event.name} at seat {ticket.seat_number}",
        image_reference=image_reference,
        attributes=(
            Attribute(trait_type="Event Name", value=event.name),
            Attribute(trait_type="Location", value=event.location),
            Attribute(trait_type="Date", value=event.date.isoformat()),
            Attribute(trait_type="Seat", value=str(ticket.seat_number)),
        ),
    )
