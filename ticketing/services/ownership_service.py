"""Ownership service - the ledger of who holds each ticket."""

from ticketing.domain.errors import EventNotFoundError, NotAuthorizedError, TicketNotFoundError
from ticketing.domain.metadata import DEFAULT_IMAGE_REFERENCE, project
from ticketing.logger_config import log_rejections
from ticketing.services.context import CallerContext
from ticketing.services.ticket_service import lookup_ticket_id, parse_identity
from ticketing.stores.interfaces import RegistryStore


class OwnershipService:
    """Service for authorized ticket transfers."""

    def __init__(
        self,
        store: RegistryStore,
        image_reference: str = DEFAULT_IMAGE_REFERENCE,
    ) -> None:
        self._store = store
        self._image_reference = image_reference

    def transfer_ticket(self, ticket_id: str, new_owner: str, caller: CallerContext) -> None:
        """Hand a ticket to ``new_owner`` on behalf of the authenticated caller.

        The requester is always taken from ``caller``; there is no way to name
        the current owner in the call itself. The ownership check and the
        write happen under one store transaction, so readers see either the
        old owner or the new one.

        Raises:
            TicketNotFoundError: If the ticket does not exist.
            NotAuthorizedError: If the caller does not currently own the ticket.
            InvalidInputError: If the new owner is blank.
        """
        requester = caller.current_caller()

        with log_rejections(
            "transfer_ticket", ticket_id=ticket_id, requester=requester.value
        ) as log:
            parsed_ticket_id = lookup_ticket_id(ticket_id)

            with self._store.transaction():
                ticket = self._store.get_ticket(parsed_ticket_id)
                if ticket is None:
                    raise TicketNotFoundError(ticket_id)
                if ticket.owner != requester:
                    raise NotAuthorizedError(ticket_id)
                recipient = parse_identity(new_owner, field="new_owner")

                event = self._store.get_event(ticket.event_id)
                if event is None:
                    raise EventNotFoundError(ticket.event_id.value)

                transferred = ticket.with_owner(recipient)
                self._store.save_ticket(
                    transferred, project(event, transferred, self._image_reference)
                )

            log.info("Transferred ticket to={}", recipient)
