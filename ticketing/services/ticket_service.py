"""Ticket service - seat allocation and ticket lookups."""

import operator

from ticketing.domain.errors import (
    EventNotFoundError,
    InvalidInputError,
    SeatAlreadyTakenError,
    SeatOutOfRangeError,
    TicketNotFoundError,
)
from ticketing.domain.metadata import DEFAULT_IMAGE_REFERENCE, project
from ticketing.domain.models import Event, Ticket, TicketMetadata
from ticketing.domain.value_objects import Identity, SeatNumber, TicketId
from ticketing.logger_config import log_rejections
from ticketing.services.event_service import lookup_event_id
from ticketing.stores.interfaces import RegistryStore


def lookup_ticket_id(ticket_id: str) -> TicketId:
    """Parse an ID used to look a ticket up. A blank ID names no ticket."""
    try:
        return TicketId(ticket_id)
    except ValueError as exc:
        raise TicketNotFoundError(ticket_id) from exc


def parse_identity(identity: str, field: str = "owner") -> Identity:
    try:
        return Identity(identity)
    except ValueError as exc:
        raise InvalidInputError(f"Invalid {field}={identity!r}") from exc


def parse_seat_number(seat_number: int, event: Event) -> SeatNumber:
    """Return the seat of ``event`` addressed by ``seat_number``.

    Raises:
        InvalidInputError: If the value is not an integer (bools included).
        SeatOutOfRangeError: Unless 0 <= seat_number < seat_capacity.
    """
    if isinstance(seat_number, bool):
        raise InvalidInputError(f"Invalid seat_number={seat_number!r}")
    try:
        index = operator.index(seat_number)
    except TypeError as exc:
        raise InvalidInputError(f"Invalid seat_number={seat_number!r}") from exc
    if index < 0:
        raise SeatOutOfRangeError(index, event.seat_capacity.value)
    seat = SeatNumber(index)
    if not event.seat_capacity.contains(seat):
        raise SeatOutOfRangeError(index, event.seat_capacity.value)
    return seat


class TicketService:
    """Service for minting tickets and reading ticket state."""

    def __init__(
        self,
        store: RegistryStore,
        image_reference: str = DEFAULT_IMAGE_REFERENCE,
    ) -> None:
        self._store = store
        self._image_reference = image_reference

    def mint_ticket(self, event_id: str, seat_number: int, owner_identity: str) -> Ticket:
        """Mint the ticket for one seat of an event.

        The ticket ID is derived from the event and seat, so the existence
        check and the insert below are the only guard against minting a seat
        twice. Both run under one store transaction.

        Raises:
            EventNotFoundError: If the event does not exist.
            InvalidInputError: If the seat is not an integer or the owner is blank.
            SeatOutOfRangeError: Unless 0 <= seat_number < seat_capacity.
            SeatAlreadyTakenError: If the seat has already been minted.
        """
        with log_rejections("mint_ticket", event_id=event_id, seat_number=seat_number) as log:
            parsed_event_id = lookup_event_id(event_id)

            with self._store.transaction():
                event = self._store.get_event(parsed_event_id)
                if event is None:
                    raise EventNotFoundError(event_id)

                seat = parse_seat_number(seat_number, event)
                owner = parse_identity(owner_identity)

                ticket_id = TicketId.for_seat(event.id, seat)
                if self._store.ticket_exists(ticket_id):
                    raise SeatAlreadyTakenError(ticket_id.value)

                ticket = Ticket(id=ticket_id, event_id=event.id, seat_number=seat, owner=owner)
                self._store.save_ticket(ticket, project(event, ticket, self._image_reference))

            log.bind(ticket_id=ticket_id.value).info("Minted ticket owner={}", owner)
        return ticket

    def get_ticket(self, ticket_id: str) -> Ticket:
        """Return a ticket by ID.

        Raises:
            TicketNotFoundError: If the ticket does not exist.
        """
        with log_rejections("get_ticket", ticket_id=ticket_id):
            ticket = self._store.get_ticket(lookup_ticket_id(ticket_id))
            if ticket is None:
                raise TicketNotFoundError(ticket_id)
        return ticket

    def check_ticket_owner(self, ticket_id: str) -> Identity:
        """Return the current owner of a ticket."""
        return self.get_ticket(ticket_id).owner

    def get_ticket_metadata(self, ticket_id: str) -> TicketMetadata:
        """Return the display descriptor stored for a ticket.

        Raises:
            TicketNotFoundError: If the ticket does not exist.
        """
        with log_rejections("get_ticket_metadata", ticket_id=ticket_id):
            metadata = self._store.get_metadata(lookup_ticket_id(ticket_id))
            if metadata is None:
                raise TicketNotFoundError(ticket_id)
        return metadata

    def list_tickets(self, event_id: str) -> list[Ticket]:
        """Return the minted tickets of an event ordered by seat.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        with log_rejections("list_tickets", event_id=event_id):
            parsed = lookup_event_id(event_id)
            with self._store.transaction():
                if not self._store.event_exists(parsed):
                    raise EventNotFoundError(event_id)
                return self._store.list_tickets(parsed)
