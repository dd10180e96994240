"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from ticketing.container import Registry, get_registry
from ticketing.domain.errors import (
    AlreadyExistsError,
    DomainError,
    InvalidInputError,
    NotAuthorizedError,
    NotFoundError,
    SeatAlreadyTakenError,
)
from ticketing.handlers.serializers import (
    EventCreateSerializer,
    EventSerializer,
    TicketMetadataSerializer,
    TicketMintSerializer,
    TicketSerializer,
    TicketTransferSerializer,
)

ERROR_STATUS = (
    (InvalidInputError, status.HTTP_400_BAD_REQUEST),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (AlreadyExistsError, status.HTTP_409_CONFLICT),
    (SeatAlreadyTakenError, status.HTTP_409_CONFLICT),
)


def error_response(error: DomainError) -> Response:
    status_code = next(
        (code for error_type, code in ERROR_STATUS if isinstance(error, error_type)),
        status.HTTP_400_BAD_REQUEST,
    )
    return Response({"code": error.code.value, "message": error.message}, status=status_code)


class RegistryView(APIView):
    """Base view that resolves the registry and maps domain errors."""

    @property
    def registry(self) -> Registry:
        return get_registry()

    def handle_exception(self, exc: Exception) -> Response:
        if isinstance(exc, DomainError):
            return error_response(exc)
        return super().handle_exception(exc)


class EventListView(RegistryView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        events = self.registry.events.list_events()
        return Response(EventSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = EventCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = self.registry.events.create_event(**serializer.validated_data)
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(RegistryView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        event = self.registry.events.get_event(event_id)
        return Response(EventSerializer(event).data)


class EventTicketsView(RegistryView):
    """Handler for GET/POST /api/events/{event_id}/tickets"""

    def get(self, request: Request, event_id: str) -> Response:
        tickets = self.registry.tickets.list_tickets(event_id)
        return Response(TicketSerializer(tickets, many=True).data)

    def post(self, request: Request, event_id: str) -> Response:
        serializer = TicketMintSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        ticket = self.registry.tickets.mint_ticket(
            event_id,
            serializer.validated_data["seat_number"],
            serializer.validated_data["owner"],
        )
        return Response(TicketSerializer(ticket).data, status=status.HTTP_201_CREATED)


class TicketOwnerView(RegistryView):
    """Handler for GET /api/tickets/{ticket_id}/owner"""

    def get(self, request: Request, ticket_id: str) -> Response:
        owner = self.registry.tickets.check_ticket_owner(ticket_id)
        return Response({"ticket_id": ticket_id, "owner": owner.value})


class TicketMetadataView(RegistryView):
    """Handler for GET /api/tickets/{ticket_id}/metadata"""

    def get(self, request: Request, ticket_id: str) -> Response:
        metadata = self.registry.tickets.get_ticket_metadata(ticket_id)
        return Response(TicketMetadataSerializer(metadata).data)


class TicketTransferView(RegistryView):
    """Handler for POST /api/tickets/{ticket_id}/transfer"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request, ticket_id: str) -> Response:
        serializer = TicketTransferSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.registry.ownership.transfer_ticket(
            ticket_id,
            serializer.validated_data["new_owner"],
            caller=request.user,
        )
        return Response(status=status.HTTP_204_NO_CONTENT)
