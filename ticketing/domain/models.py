"""Domain models representing registry state.

These are pure domain objects with no API input rules.
Transport representations live in ticketing/handlers/serializers.py.
"""

from dataclasses import dataclass, replace
from datetime import datetime

from ticketing.domain.value_objects import Capacity, EventId, Identity, SeatNumber, TicketId


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name: str
    date: datetime
    location: str
    seat_capacity: Capacity
    nft_collection_ref: str | None = None


@dataclass(frozen=True)
class Ticket:
    """Domain representation of a minted Ticket."""

    id: TicketId
    event_id: EventId
    seat_number: SeatNumber
    owner: Identity

    def with_owner(self, owner: Identity) -> "Ticket":
        return replace(self, owner=owner)


@dataclass(frozen=True)
class Attribute:
    """Single display trait of a ticket."""

    trait_type: str
    value: str


@dataclass(frozen=True)
class TicketMetadata:
    """Display descriptor derived from an Event and a Ticket.

    The owner is a snapshot; the Ticket remains the source of ownership truth.
    """

    token_id: TicketId
    owner: Identity
    title: str
    description: str
    image_reference: str
    attributes: tuple[Attribute, ...] = ()
