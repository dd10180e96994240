"""Unit tests for the registry services.

These test validation, error mapping and the all-or-nothing behaviour of
every mutating operation.
Run with: pytest tests/test_services.py -v
"""

from datetime import datetime, timedelta

import pytest

from ticketing.domain import Identity
from ticketing.domain.errors import (
    AlreadyExistsError,
    EventNotFoundError,
    InvalidInputError,
    NotAuthorizedError,
    SeatAlreadyTakenError,
    SeatOutOfRangeError,
    TicketNotFoundError,
)
from ticketing.services import EventService, FixedClock, StaticCallerContext

from tests.conftest import IN_ONE_HOUR, NOW


def as_caller(identity: str) -> StaticCallerContext:
    return StaticCallerContext(Identity(identity))


class TestEventService:
    """Tests for EventService."""

    def test_create_event_returns_event(self, event_service):
        """A valid event is stored and returned."""
        event = event_service.create_event("E1", "Concert XYZ", IN_ONE_HOUR, "Main Hall", 10)
        assert event.id.value == "E1"
        assert event.seat_capacity.value == 10
        assert event.nft_collection_ref is None
        assert event_service.get_event("E1") == event

    def test_duplicate_id_raises_already_exists(self, event_service):
        """A reused ID is rejected and the original event is kept."""
        first = event_service.create_event("E1", "First", IN_ONE_HOUR, "Hall A", 10)
        with pytest.raises(AlreadyExistsError):
            event_service.create_event("E1", "Second", IN_ONE_HOUR, "Hall B", 5)
        assert event_service.get_event("E1") == first
        assert event_service.list_events() == [first]

    @pytest.mark.parametrize(
        "name, location, seat_capacity",
        [
            ("   ", "Main Hall", 10),
            ("Concert", "", 10),
            ("Concert", "Main Hall", 0),
            ("Concert", "Main Hall", -3),
        ],
    )
    def test_invalid_fields_raise_invalid_input(self, event_service, name, location, seat_capacity):
        """Blank text and non-positive capacity are rejected without side effects."""
        with pytest.raises(InvalidInputError):
            event_service.create_event("E1", name, IN_ONE_HOUR, location, seat_capacity)
        assert event_service.list_events() == []

    def test_blank_id_raises_invalid_input(self, event_service):
        with pytest.raises(InvalidInputError):
            event_service.create_event(" ", "Concert", IN_ONE_HOUR, "Main Hall", 10)

    def test_date_inside_lead_time_is_rejected(self, event_service):
        """Events must start at least five minutes from now."""
        with pytest.raises(InvalidInputError):
            event_service.create_event(
                "E1", "Concert", NOW + timedelta(minutes=4), "Main Hall", 10
            )
        assert event_service.list_events() == []

    def test_date_exactly_at_lead_time_is_accepted(self, event_service):
        event = event_service.create_event(
            "E1", "Concert", NOW + timedelta(minutes=5), "Main Hall", 10
        )
        assert event.date == NOW + timedelta(minutes=5)

    def test_naive_date_is_rejected(self, event_service):
        with pytest.raises(InvalidInputError):
            event_service.create_event("E1", "Concert", datetime(2030, 1, 1), "Main Hall", 10)

    def test_lead_time_is_configurable(self, store, clock):
        """A custom minimum lead time replaces the five minute default."""
        service = EventService(store, clock, minimum_lead_time=timedelta(hours=2))
        with pytest.raises(InvalidInputError):
            service.create_event("E1", "Concert", IN_ONE_HOUR, "Main Hall", 10)

    def test_failed_validation_does_not_reserve_id(self, event_service):
        """An ID from a rejected creation can still be registered."""
        with pytest.raises(InvalidInputError):
            event_service.create_event("E1", "Concert", NOW, "Main Hall", 10)
        event = event_service.create_event("E1", "Concert", IN_ONE_HOUR, "Main Hall", 10)
        assert event.id.value == "E1"

    def test_get_event_not_found_raises_error(self, event_service):
        """get_event raises EventNotFoundError for unknown IDs."""
        with pytest.raises(EventNotFoundError):
            event_service.get_event("missing")

    def test_get_event_is_repeatable(self, event_service, concert):
        """Repeated reads without mutation return the same event."""
        assert event_service.get_event("E1") == event_service.get_event("E1") == concert

    def test_get_event_blank_id_is_not_found(self, event_service):
        """A blank ID names no event, so the lookup reports not found."""
        with pytest.raises(EventNotFoundError):
            event_service.get_event(" ")

    def test_bool_capacity_is_rejected(self, event_service):
        with pytest.raises(InvalidInputError):
            event_service.create_event("E1", "Concert", IN_ONE_HOUR, "Main Hall", True)
        assert event_service.list_events() == []

    def test_list_events_ordered_by_date(self, event_service):
        later = event_service.create_event("B", "Later", IN_ONE_HOUR + timedelta(days=1), "Hall", 1)
        sooner = event_service.create_event("A", "Sooner", IN_ONE_HOUR, "Hall", 1)
        assert event_service.list_events() == [sooner, later]

    def test_clock_is_consulted_at_creation(self, store):
        """The lead time is measured against the clock at call time."""
        clock = FixedClock(NOW)
        service = EventService(store, clock)
        clock.advance_to(IN_ONE_HOUR)
        with pytest.raises(InvalidInputError):
            service.create_event("E1", "Concert", IN_ONE_HOUR, "Main Hall", 10)


class TestTicketService:
    """Tests for TicketService."""

    def test_mint_ticket_derives_id_from_seat(self, ticket_service, concert):
        """The first mint of a seat succeeds with ID '<event>_<seat>'."""
        ticket = ticket_service.mint_ticket("E1", 0, "alice")
        assert ticket.id.value == "E1_0"
        assert ticket.owner == Identity("alice")
        assert ticket_service.check_ticket_owner("E1_0") == Identity("alice")

    def test_second_mint_of_seat_raises_seat_taken(self, ticket_service, concert):
        """A seat can be minted only once; the first owner keeps it."""
        ticket_service.mint_ticket("E1", 0, "alice")
        with pytest.raises(SeatAlreadyTakenError):
            ticket_service.mint_ticket("E1", 0, "bob")
        assert ticket_service.check_ticket_owner("E1_0") == Identity("alice")

    def test_seat_equal_to_capacity_is_out_of_range(self, ticket_service, event_service):
        """With capacity 10, seat 9 is the last valid seat and seat 10 is rejected."""
        event_service.create_event("E10", "Concert", IN_ONE_HOUR, "Main Hall", 10)
        assert ticket_service.mint_ticket("E10", 9, "alice").id.value == "E10_9"
        with pytest.raises(SeatOutOfRangeError):
            ticket_service.mint_ticket("E10", 10, "alice")

    def test_negative_seat_is_out_of_range(self, ticket_service, concert):
        with pytest.raises(InvalidInputError):
            ticket_service.mint_ticket("E1", -1, "alice")

    def test_mint_for_unknown_event_raises_not_found(self, ticket_service):
        with pytest.raises(EventNotFoundError):
            ticket_service.mint_ticket("missing", 0, "alice")

    def test_blank_owner_raises_invalid_input(self, ticket_service, concert):
        with pytest.raises(InvalidInputError):
            ticket_service.mint_ticket("E1", 0, " ")
        assert ticket_service.list_tickets("E1") == []

    def test_mint_stores_metadata(self, ticket_service, concert):
        """Minting stores the display descriptor under the ticket ID."""
        ticket_service.mint_ticket("E1", 1, "alice")
        metadata = ticket_service.get_ticket_metadata("E1_1")
        assert metadata.description == "Ticket for Concert XYZ at seat 1"
        assert metadata.owner == Identity("alice")

    def test_check_owner_of_unknown_ticket_raises_not_found(self, ticket_service):
        with pytest.raises(TicketNotFoundError):
            ticket_service.check_ticket_owner("E1_0")

    def test_check_owner_blank_id_is_not_found(self, ticket_service):
        with pytest.raises(TicketNotFoundError):
            ticket_service.check_ticket_owner("")

    def test_check_owner_is_repeatable(self, ticket_service, concert):
        """Repeated owner reads without mutation return the same identity."""
        ticket_service.mint_ticket("E1", 0, "alice")
        first = ticket_service.check_ticket_owner("E1_0")
        assert ticket_service.check_ticket_owner("E1_0") == first == Identity("alice")

    def test_bool_seat_cannot_mint_a_second_ticket(self, ticket_service, concert):
        """True is not accepted as seat 1, so seat 1 keeps a single ticket."""
        ticket_service.mint_ticket("E1", 1, "alice")
        with pytest.raises(InvalidInputError):
            ticket_service.mint_ticket("E1", True, "bob")
        assert [t.id.value for t in ticket_service.list_tickets("E1")] == ["E1_1"]

    def test_list_tickets_ordered_by_seat(self, ticket_service, concert):
        ticket_service.mint_ticket("E1", 1, "bob")
        ticket_service.mint_ticket("E1", 0, "alice")
        assert [t.seat_number.value for t in ticket_service.list_tickets("E1")] == [0, 1]

    def test_list_tickets_for_unknown_event_raises_not_found(self, ticket_service):
        with pytest.raises(EventNotFoundError):
            ticket_service.list_tickets("missing")


class TestOwnershipService:
    """Tests for OwnershipService."""

    def test_owner_can_transfer(self, ticket_service, ownership_service, concert):
        """The current owner hands the ticket to someone else."""
        ticket_service.mint_ticket("E1", 0, "alice")
        ownership_service.transfer_ticket("E1_0", "bob", caller=as_caller("alice"))
        assert ticket_service.check_ticket_owner("E1_0") == Identity("bob")

    def test_non_owner_is_not_authorized(self, ticket_service, ownership_service, concert):
        """Anyone but the current owner is rejected and ownership is unchanged."""
        ticket_service.mint_ticket("E1", 0, "alice")
        with pytest.raises(NotAuthorizedError):
            ownership_service.transfer_ticket("E1_0", "mallory", caller=as_caller("mallory"))
        assert ticket_service.check_ticket_owner("E1_0") == Identity("alice")

    def test_previous_owner_loses_authority(self, ticket_service, ownership_service, concert):
        """Authorization follows the current holder, not the original minter."""
        ticket_service.mint_ticket("E1", 0, "alice")
        ownership_service.transfer_ticket("E1_0", "bob", caller=as_caller("alice"))
        with pytest.raises(NotAuthorizedError):
            ownership_service.transfer_ticket("E1_0", "carol", caller=as_caller("alice"))
        ownership_service.transfer_ticket("E1_0", "carol", caller=as_caller("bob"))
        assert ticket_service.check_ticket_owner("E1_0") == Identity("carol")

    def test_unknown_ticket_raises_not_found(self, ownership_service):
        with pytest.raises(TicketNotFoundError):
            ownership_service.transfer_ticket("E1_0", "bob", caller=as_caller("alice"))

    def test_unknown_ticket_with_blank_new_owner_is_not_found(self, ownership_service):
        """Ticket existence is checked before the recipient."""
        with pytest.raises(TicketNotFoundError):
            ownership_service.transfer_ticket("E1_0", "", caller=as_caller("alice"))

    def test_non_owner_with_blank_new_owner_is_not_authorized(
        self, ticket_service, ownership_service, concert
    ):
        ticket_service.mint_ticket("E1", 0, "alice")
        with pytest.raises(NotAuthorizedError):
            ownership_service.transfer_ticket("E1_0", "", caller=as_caller("mallory"))

    def test_blank_new_owner_raises_invalid_input(self, ticket_service, ownership_service, concert):
        ticket_service.mint_ticket("E1", 0, "alice")
        with pytest.raises(InvalidInputError):
            ownership_service.transfer_ticket("E1_0", "", caller=as_caller("alice"))
        assert ticket_service.check_ticket_owner("E1_0") == Identity("alice")

    def test_transfer_regenerates_metadata(self, ticket_service, ownership_service, concert):
        """The metadata owner snapshot follows the ticket after a transfer."""
        ticket_service.mint_ticket("E1", 0, "alice")
        ownership_service.transfer_ticket("E1_0", "bob", caller=as_caller("alice"))
        assert ticket_service.get_ticket_metadata("E1_0").owner == Identity("bob")


class TestTicketLifecycle:
    """End-to-end scenario across the three services."""

    def test_mint_and_transfer_scenario(self, event_service, ticket_service, ownership_service):
        event_service.create_event("E1", "Concert XYZ", IN_ONE_HOUR, "Main Hall", 2)

        ticket = ticket_service.mint_ticket("E1", 0, "A")
        assert ticket.id.value == "E1_0"

        with pytest.raises(SeatAlreadyTakenError):
            ticket_service.mint_ticket("E1", 0, "B")
        with pytest.raises(InvalidInputError):
            ticket_service.mint_ticket("E1", 2, "B")
        with pytest.raises(NotAuthorizedError):
            ownership_service.transfer_ticket("E1_0", "B", caller=as_caller("B"))

        ownership_service.transfer_ticket("E1_0", "B", caller=as_caller("A"))
        assert ticket_service.check_ticket_owner("E1_0") == Identity("B")


def warnings_for(records: list, operation: str) -> list:
    return [
        r for r in records
        if r["level"].name == "WARNING" and r["extra"].get("operation") == operation
    ]


class TestRejectionLogging:
    """Rejected operations are logged at WARNING with their identifiers bound."""

    def test_invalid_event_is_logged_with_event_id(self, event_service, log_records):
        with pytest.raises(InvalidInputError):
            event_service.create_event("E1", "", IN_ONE_HOUR, "Main Hall", 10)
        [record] = warnings_for(log_records, "create_event")
        assert record["extra"]["event_id"] == "E1"

    def test_unknown_event_lookup_is_logged(self, event_service, log_records):
        with pytest.raises(EventNotFoundError):
            event_service.get_event("missing")
        [record] = warnings_for(log_records, "get_event")
        assert record["extra"]["event_id"] == "missing"

    def test_out_of_range_seat_is_logged(self, ticket_service, concert, log_records):
        with pytest.raises(SeatOutOfRangeError):
            ticket_service.mint_ticket("E1", 5, "alice")
        [record] = warnings_for(log_records, "mint_ticket")
        assert record["extra"]["event_id"] == "E1"
        assert record["extra"]["seat_number"] == 5

    def test_unknown_ticket_transfer_is_logged_with_ticket_id(
        self, ownership_service, log_records
    ):
        with pytest.raises(TicketNotFoundError):
            ownership_service.transfer_ticket("E1_0", "bob", caller=as_caller("alice"))
        [record] = warnings_for(log_records, "transfer_ticket")
        assert record["extra"]["ticket_id"] == "E1_0"
        assert record["extra"]["requester"] == "alice"

    def test_successful_mint_logs_info_with_ticket_id(self, ticket_service, concert, log_records):
        ticket_service.mint_ticket("E1", 0, "alice")
        infos = [r for r in log_records if r["level"].name == "INFO"]
        assert any(r["extra"].get("ticket_id") == "E1_0" for r in infos)
        assert warnings_for(log_records, "mint_ticket") == []
