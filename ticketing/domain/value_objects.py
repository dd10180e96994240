"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self


def _is_plain_int(value: object) -> bool:
    # bool is an int subclass but would format as "True" in derived IDs.
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class EventId:
    """Caller-assigned identifier for an Event."""

    value: str

    def __post_init__(self) -> None:
        if not self.value.strip():
            raise ValueError("Event ID cannot be blank")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SeatNumber:
    """Zero-based seat index within an event."""

    value: int

    def __post_init__(self) -> None:
        if not _is_plain_int(self.value):
            raise ValueError("Seat number must be an integer")
        if self.value < 0:
            raise ValueError("Seat number cannot be negative")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class TicketId:
    """Identifier of a Ticket, derived from the seat it is bound to."""

    value: str

    def __post_init__(self) -> None:
        if not self.value.strip():
            raise ValueError("Ticket ID cannot be blank")

    @classmethod
    def for_seat(cls, event_id: EventId, seat_number: SeatNumber) -> Self:
        # Seat numbers never contain "_", so the last separator is unambiguous.
        return cls(value=f"{event_id.value}_{seat_number.value}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Capacity:
    """Positive number of seats an event offers."""

    value: int

    def __post_init__(self) -> None:
        if not _is_plain_int(self.value):
            raise ValueError("Capacity must be an integer")
        if self.value <= 0:
            raise ValueError("Capacity must be positive")

    def contains(self, seat_number: SeatNumber) -> bool:
        return seat_number.value < self.value


@dataclass(frozen=True)
class Identity:
    """Opaque principal that can own and transfer tickets."""

    value: str

    def __post_init__(self) -> None:
        if not self.value.strip():
            raise ValueError("Identity cannot be blank")

    def __str__(self) -> str:
        return self.value
