"""Collaborator ports consumed by the services.

The clock supplies the current time for date validation. The caller context
supplies the authenticated identity of the requester and is built by the
transport layer, never from a request payload.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from django.utils import timezone

from ticketing.domain import Identity


class Clock(ABC):
    """Source of the current, timezone-aware time."""

    @abstractmethod
    def now(self) -> datetime: ...


class SystemClock(Clock):
    def now(self) -> datetime:
        return timezone.now()


class FixedClock(Clock):
    """Clock pinned to a given instant. Used in tests and replays."""

    def __init__(self, instant: datetime) -> None:
        if timezone.is_naive(instant):
            raise ValueError("FixedClock requires a timezone-aware datetime")
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def advance_to(self, instant: datetime) -> None:
        if instant < self._instant:
            raise ValueError("Clock cannot move backwards")
        self._instant = instant


class CallerContext(ABC):
    """Per-request source of the authenticated caller."""

    @abstractmethod
    def current_caller(self) -> Identity: ...


class StaticCallerContext(CallerContext):
    """Caller context wrapping an identity the auth layer has already verified."""

    def __init__(self, identity: Identity) -> None:
        self._identity = identity

    def current_caller(self) -> Identity:
        return self._identity
