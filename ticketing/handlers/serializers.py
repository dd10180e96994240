"""Serializers for request input and domain model responses.

Input serializers check format only. Blank names, capacities and seat
ranges are domain rules and are left to the services.
"""

from rest_framework import serializers


class EventCreateSerializer(serializers.Serializer):
    """Body of POST /api/events."""

    id = serializers.CharField(allow_blank=True, trim_whitespace=False)
    name = serializers.CharField(allow_blank=True, trim_whitespace=False)
    date = serializers.DateTimeField()
    location = serializers.CharField(allow_blank=True, trim_whitespace=False)
    seat_capacity = serializers.IntegerField()


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField(source="id.value")
    name = serializers.CharField()
    date = serializers.DateTimeField()
    location = serializers.CharField()
    seat_capacity = serializers.IntegerField(source="seat_capacity.value")
    nft_collection_ref = serializers.CharField(allow_null=True)


class TicketMintSerializer(serializers.Serializer):
    """Body of POST /api/events/{event_id}/tickets."""

    seat_number = serializers.IntegerField()
    owner = serializers.CharField(allow_blank=True, trim_whitespace=False)


class TicketSerializer(serializers.Serializer):
    """Serializer for Ticket domain model."""

    id = serializers.CharField(source="id.value")
    event_id = serializers.CharField(source="event_id.value")
    seat_number = serializers.IntegerField(source="seat_number.value")
    owner = serializers.CharField(source="owner.value")


class TicketTransferSerializer(serializers.Serializer):
    """Body of POST /api/tickets/{ticket_id}/transfer.

    Only the recipient is accepted. The requester comes from authentication.
    """

    new_owner = serializers.CharField(allow_blank=True, trim_whitespace=False)


class AttributeSerializer(serializers.Serializer):
    trait_type = serializers.CharField()
    value = serializers.CharField()


class TicketMetadataSerializer(serializers.Serializer):
    """Serializer for TicketMetadata domain model."""

    token_id = serializers.CharField(source="token_id.value")
    owner = serializers.CharField(source="owner.value")
    title = serializers.CharField()
    description = serializers.CharField()
    image_reference = serializers.CharField()
    attributes = AttributeSerializer(many=True)
