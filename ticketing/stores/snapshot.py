"""Snapshot encoding for the registry maps.

A snapshot is a plain mapping of three maps keyed by ID string::

    {"events": {...}, "tickets": {...}, "metadata": {...}}

Cross references are ID strings only, so a snapshot restores without repair.
"""

from datetime import datetime
from typing import Any

from ticketing.domain import (
    Attribute,
    Capacity,
    Event,
    EventId,
    Identity,
    SeatNumber,
    Ticket,
    TicketId,
    TicketMetadata,
)

SNAPSHOT_VERSION = 1


def encode_event(event: Event) -> dict[str, Any]:
    return {
        "id": event.id.value,
        "name": event.name,
        "date": event.date.isoformat(),
        "location": event.location,
        "seat_capacity": event.seat_capacity.value,
        "nft_collection_ref": event.nft_collection_ref,
    }


def decode_event(data: dict[str, Any]) -> Event:
    return Event(
        id=EventId(data["id"]),
        name=data["name"],
        date=datetime.fromisoformat(data["date"]),
        location=data["location"],
        seat_capacity=Capacity(data["seat_capacity"]),
        nft_collection_ref=data.get("nft_collection_ref"),
    )


def encode_ticket(ticket: Ticket) -> dict[str, Any]:
    return {
        "id": ticket.id.value,
        "event_id": ticket.event_id.value,
        "seat_number": ticket.seat_number.value,
        "owner": ticket.owner.value,
    }


def decode_ticket(data: dict[str, Any]) -> Ticket:
    return Ticket(
        id=TicketId(data["id"]),
        event_id=EventId(data["event_id"]),
        seat_number=SeatNumber(data["seat_number"]),
        owner=Identity(data["owner"]),
    )


def encode_metadata(metadata: TicketMetadata) -> dict[str, Any]:
    return {
        "token_id": metadata.token_id.value,
        "owner": metadata.owner.value,
        "title": metadata.title,
        "description": metadata.description,
        "image_reference": metadata.image_reference,
        "attributes": [[a.trait_type, a.value] for a in metadata.attributes],
    }


def decode_metadata(data: dict[str, Any]) -> TicketMetadata:
    return TicketMetadata(
        token_id=TicketId(data["token_id"]),
        owner=Identity(data["owner"]),
        title=data["title"],
        description=data["description"],
        image_reference=data["image_reference"],
        attributes=tuple(
            Attribute(trait_type=trait_type, value=value)
            for trait_type, value in data["attributes"]
        ),
    )


def encode_snapshot(
    events: dict[str, Event],
    tickets: dict[str, Ticket],
    metadata: dict[str, TicketMetadata],
) -> dict[str, Any]:
    return {
        "version": SNAPSHOT_VERSION,
        "events": {key: encode_event(e) for key, e in events.items()},
        "tickets": {key: encode_ticket(t) for key, t in tickets.items()},
        "metadata": {key: encode_metadata(m) for key, m in metadata.items()},
    }


def decode_snapshot(
    data: dict[str, Any],
) -> tuple[dict[str, Event], dict[str, Ticket], dict[str, TicketMetadata]]:
    """Decode a snapshot into the three maps.

    Raises:
        ValueError: If the version is unsupported or a record is invalid.
    """
    version = data.get("version", SNAPSHOT_VERSION)
    if version != SNAPSHOT_VERSION:
        raise ValueError(f"Unsupported snapshot version: {version}")

    events = {key: decode_event(e) for key, e in data.get("events", {}).items()}
    tickets = {key: decode_ticket(t) for key, t in data.get("tickets", {}).items()}
    metadata = {key: decode_metadata(m) for key, m in data.get("metadata", {}).items()}
    return events, tickets, metadata
