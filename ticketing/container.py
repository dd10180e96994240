"""Process-wide wiring of the registry.

The store is process-lifetime state. Handlers reach it through
``get_registry()``; tests swap it with ``reset_registry()``.
"""

import threading
from dataclasses import dataclass
from datetime import timedelta

from django.conf import settings

from ticketing.services import Clock, EventService, OwnershipService, SystemClock, TicketService
from ticketing.stores import InMemoryRegistryStore, RegistryStore


@dataclass(frozen=True)
class Registry:
    """The three services sharing one store."""

    store: RegistryStore
    events: EventService
    tickets: TicketService
    ownership: OwnershipService


def build_registry(store: RegistryStore | None = None, clock: Clock | None = None) -> Registry:
    config = settings.TICKETING
    store = store if store is not None else InMemoryRegistryStore()
    clock = clock if clock is not None else SystemClock()
    image_reference = config["TICKET_IMAGE"]
    return Registry(
        store=store,
        events=EventService(
            store,
            clock,
            minimum_lead_time=timedelta(seconds=config["MIN_LEAD_SECONDS"]),
        ),
        tickets=TicketService(store, image_reference=image_reference),
        ownership=OwnershipService(store, image_reference=image_reference),
    )


_registry: Registry | None = None
_registry_lock = threading.Lock()


def get_registry() -> Registry:
    global _registry
    with _registry_lock:
        if _registry is None:
            _registry = build_registry()
        return _registry


def reset_registry(registry: Registry | None = None) -> Registry:
    """Replace the process registry, building a fresh one when none is given."""
    global _registry
    with _registry_lock:
        _registry = registry if registry is not None else build_registry()
        return _registry
