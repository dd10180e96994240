"""In-memory implementation of the RegistryStore.

All three maps share one re-entrant lock. Single reads take it on their own;
services hold it across a check-then-write through ``transaction()``.
"""

import threading
from contextlib import AbstractContextManager
from typing import Any, Self

from ticketing.domain import Event, EventId, Ticket, TicketId, TicketMetadata
from ticketing.stores.interfaces import RegistryStore
from ticketing.stores.snapshot import decode_snapshot, encode_snapshot


class InMemoryRegistryStore(RegistryStore):
    """Process-lifetime store guarded by a single RLock."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._events: dict[str, Event] = {}
        self._tickets: dict[str, Ticket] = {}
        self._metadata: dict[str, TicketMetadata] = {}

    @classmethod
    def from_snapshot(cls, data: dict[str, Any]) -> Self:
        store = cls()
        store._events, store._tickets, store._metadata = decode_snapshot(data)
        return store

    def transaction(self) -> AbstractContextManager[Any]:
        return self._lock

    def list_events(self) -> list[Event]:
        with self._lock:
            events = list(self._events.values())
        return sorted(events, key=lambda e: (e.date, e.id.value))

    def get_event(self, event_id: EventId) -> Event | None:
        with self._lock:
            return self._events.get(event_id.value)

    def event_exists(self, event_id: EventId) -> bool:
        with self._lock:
            return event_id.value in self._events

    def add_event(self, event: Event) -> None:
        with self._lock:
            if event.id.value in self._events:
                raise KeyError(event.id.value)
            self._events[event.id.value] = event

    def get_ticket(self, ticket_id: TicketId) -> Ticket | None:
        with self._lock:
            return self._tickets.get(ticket_id.value)

    def ticket_exists(self, ticket_id: TicketId) -> bool:
        with self._lock:
            return ticket_id.value in self._tickets

    def list_tickets(self, event_id: EventId) -> list[Ticket]:
        with self._lock:
            tickets = [t for t in self._tickets.values() if t.event_id == event_id]
        return sorted(tickets, key=lambda t: t.seat_number.value)

    def save_ticket(self, ticket: Ticket, metadata: TicketMetadata) -> None:
        with self._lock:
            self._tickets[ticket.id.value] = ticket
            self._metadata[ticket.id.value] = metadata

    def get_metadata(self, ticket_id: TicketId) -> TicketMetadata | None:
        with self._lock:
            return self._metadata.get(ticket_id.value)

    def snapshot(self) -> dict[str, Any]:
        with self._lock:
            return encode_snapshot(
                dict(self._events), dict(self._tickets), dict(self._metadata)
            )
