"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Callers that need a
check-then-write to be atomic run it inside ``transaction()``.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Any

from ticketing.domain import Event, EventId, Ticket, TicketId, TicketMetadata


class RegistryStore(ABC):
    """Interface for the event, ticket and metadata maps."""

    @abstractmethod
    def transaction(self) -> AbstractContextManager[Any]:
        """Return a context manager that serializes access to the store."""
        ...

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by date ascending, then by ID."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def add_event(self, event: Event) -> None:
        """Insert a new event. The ID must not be present."""
        ...

    @abstractmethod
    def get_ticket(self, ticket_id: TicketId) -> Ticket | None:
        """Return a ticket by ID, or None if not found."""
        ...

    @abstractmethod
    def ticket_exists(self, ticket_id: TicketId) -> bool:
        """Check if a ticket has been minted."""
        ...

    @abstractmethod
    def list_tickets(self, event_id: EventId) -> list[Ticket]:
        """Return the tickets of an event ordered by seat number."""
        ...

    @abstractmethod
    def save_ticket(self, ticket: Ticket, metadata: TicketMetadata) -> None:
        """Insert or replace a ticket together with its metadata record."""
        ...

    @abstractmethod
    def get_metadata(self, ticket_id: TicketId) -> TicketMetadata | None:
        """Return the metadata record of a ticket, or None if not found."""
        ...

    @abstractmethod
    def snapshot(self) -> dict[str, Any]:
        """Return the whole store as a JSON-serializable mapping."""
        ...
