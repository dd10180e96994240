"""Domain error codes for the ticketing module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    ALREADY_EXISTS = "ALREADY_EXISTS"
    INVALID_INPUT = "INVALID_INPUT"
    SEAT_OUT_OF_RANGE = "SEAT_OUT_OF_RANGE"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    TICKET_NOT_FOUND = "TICKET_NOT_FOUND"
    SEAT_ALREADY_TAKEN = "SEAT_ALREADY_TAKEN"
    NOT_AUTHORIZED = "NOT_AUTHORIZED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class AlreadyExistsError(DomainError):
    """Raised when an event ID is already registered."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.ALREADY_EXISTS,
            message="Event with this ID already exists",
        )
        self.event_id = event_id


class InvalidInputError(DomainError):
    """Raised when a field is empty, zero or out of range."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_INPUT) -> None:
        super().__init__(code=code, message=message)


class SeatOutOfRangeError(InvalidInputError):
    """Raised when a seat number is not below the event's capacity."""

    def __init__(self, seat_number: int, seat_capacity: int) -> None:
        super().__init__(
            message=f"Seat {seat_number} is outside the event capacity of {seat_capacity}",
            code=ErrorCode.SEAT_OUT_OF_RANGE,
        )
        self.seat_number = seat_number


class NotFoundError(DomainError):
    """Base for lookups of unknown identifiers."""


class EventNotFoundError(NotFoundError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class TicketNotFoundError(NotFoundError):
    """Raised when a ticket is not found."""

    def __init__(self, ticket_id: str) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_FOUND,
            message="Ticket not found",
        )
        self.ticket_id = ticket_id


class SeatAlreadyTakenError(DomainError):
    """Raised when a ticket has already been minted for a seat."""

    def __init__(self, ticket_id: str) -> None:
        super().__init__(
            code=ErrorCode.SEAT_ALREADY_TAKEN,
            message="This seat is already taken",
        )
        self.ticket_id = ticket_id


class NotAuthorizedError(DomainError):
    """Raised when someone other than the current owner attempts a transfer."""

    def __init__(self, ticket_id: str) -> None:
        super().__init__(
            code=ErrorCode.NOT_AUTHORIZED,
            message="Only the ticket owner can transfer it",
        )
        self.ticket_id = ticket_id
