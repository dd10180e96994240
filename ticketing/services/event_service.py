"""Event service - owns the set of events.

Services:
- Depend only on interfaces (stores, clock)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from datetime import datetime, timedelta

from django.utils import timezone

from ticketing.domain.errors import AlreadyExistsError, EventNotFoundError, InvalidInputError
from ticketing.domain.models import Event
from ticketing.domain.value_objects import Capacity, EventId
from ticketing.logger_config import log_rejections
from ticketing.services.context import Clock
from ticketing.stores.interfaces import RegistryStore

DEFAULT_MINIMUM_LEAD_TIME = timedelta(minutes=5)


def parse_event_id(event_id: str) -> EventId:
    try:
        return EventId(event_id)
    except ValueError as exc:
        raise InvalidInputError("Invalid event ID") from exc


def lookup_event_id(event_id: str) -> EventId:
    """Parse an ID used to look an event up. A blank ID names no event."""
    try:
        return EventId(event_id)
    except ValueError as exc:
        raise EventNotFoundError(event_id) from exc


class EventService:
    """Service for event registry operations."""

    def __init__(
        self,
        store: RegistryStore,
        clock: Clock,
        minimum_lead_time: timedelta = DEFAULT_MINIMUM_LEAD_TIME,
    ) -> None:
        self._store = store
        self._clock = clock
        self._minimum_lead_time = minimum_lead_time

    def create_event(
        self,
        id: str,
        name: str,
        date: datetime,
        location: str,
        seat_capacity: int,
    ) -> Event:
        """Register a new event.

        Every field is validated before the store is touched, so a failed
        call leaves the registry unchanged.

        Raises:
            AlreadyExistsError: If an event with this ID is registered.
            InvalidInputError: If a field is blank, the capacity is not
                positive, or the date is too close to now.
        """
        with log_rejections("create_event", event_id=id) as log:
            event_id = parse_event_id(id)

            with self._store.transaction():
                if self._store.event_exists(event_id):
                    raise AlreadyExistsError(event_id.value)
                capacity = self._validate_fields(name, location, seat_capacity)
                event = Event(
                    id=event_id,
                    name=name,
                    date=self._validate_date(date),
                    location=location,
                    seat_capacity=capacity,
                )
                self._store.add_event(event)

            log.info("Created event seats={}", capacity.value)
        return event

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        with log_rejections("get_event", event_id=event_id):
            event = self._store.get_event(lookup_event_id(event_id))
            if event is None:
                raise EventNotFoundError(event_id)
        return event

    def list_events(self) -> list[Event]:
        """Return all events, soonest first."""
        return self._store.list_events()

    def _validate_fields(self, name: str, location: str, seat_capacity: int) -> Capacity:
        if not name.strip():
            raise InvalidInputError(f"Invalid name={name!r}")
        if not location.strip():
            raise InvalidInputError(f"Invalid location={location!r}")
        try:
            return Capacity(seat_capacity)
        except ValueError as exc:
            raise InvalidInputError(f"Invalid seat_capacity={seat_capacity!r}") from exc

    def _validate_date(self, date: datetime) -> datetime:
        if timezone.is_naive(date):
            raise InvalidInputError("Date must carry a timezone")
        earliest = self._clock.now() + self._minimum_lead_time
        if date < earliest:
            raise InvalidInputError(
                "Date needs to be at least "
                f"{int(self._minimum_lead_time.total_seconds())} seconds after "
                f"the current time. Date={date.isoformat()}"
            )
        return date
