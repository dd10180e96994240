"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from loguru import logger
from rest_framework.test import APIClient

from ticketing.container import reset_registry
from ticketing.services import EventService, FixedClock, OwnershipService, TicketService
from ticketing.stores import InMemoryRegistryStore

NOW = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
IN_ONE_HOUR = NOW + timedelta(hours=1)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def fresh_registry():
    reset_registry()
    yield
    reset_registry()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture
def store() -> InMemoryRegistryStore:
    return InMemoryRegistryStore()


@pytest.fixture
def event_service(store: InMemoryRegistryStore, clock: FixedClock) -> EventService:
    return EventService(store, clock)


@pytest.fixture
def ticket_service(store: InMemoryRegistryStore) -> TicketService:
    return TicketService(store)


@pytest.fixture
def ownership_service(store: InMemoryRegistryStore) -> OwnershipService:
    return OwnershipService(store)


@pytest.fixture
def concert(event_service: EventService):
    return event_service.create_event(
        id="E1",
        name="Concert XYZ",
        date=IN_ONE_HOUR,
        location="Main Hall",
        seat_capacity=2,
    )


@pytest.fixture
def log_records() -> list:
    """Collect the loguru records emitted during a test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
