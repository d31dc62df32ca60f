"""Serializers between primitive payloads and purchase domain models."""

from rest_framework import serializers

from purchases.domain.models import Reservation
from purchases.domain.value_objects import TicketCategory, TicketRequest


class TicketRequestSerializer(serializers.Serializer):
    """Parses ``{"category": "ADULT", "count": 2}`` into a TicketRequest."""

    category = serializers.ChoiceField(choices=[c.value for c in TicketCategory])
    count = serializers.IntegerField(min_value=1)

    def create(self, validated_data: dict) -> TicketRequest:
        return TicketRequest.of(validated_data["category"], validated_data["count"])


class PurchaseRequestSerializer(serializers.Serializer):
    """Parses a purchase payload.

    ``account_id`` is passed through untouched and a missing ``tickets`` key
    reads as an empty list; the domain decides whether either is acceptable.
    """

    account_id = serializers.JSONField(allow_null=True, default=None)
    tickets = TicketRequestSerializer(many=True, allow_empty=True, allow_null=True, default=list)

    def to_ticket_requests(self) -> list[TicketRequest]:
        return [
            TicketRequest.of(item["category"], item["count"])
            for item in self.validated_data["tickets"] or ()
        ]


class ReservationSerializer(serializers.Serializer):
    """Serializer for the Reservation domain model."""

    account_id = serializers.IntegerField()
    counts = serializers.SerializerMethodField()
    total_price = serializers.IntegerField()
    total_seats = serializers.IntegerField()

    def get_counts(self, obj: Reservation) -> dict[str, int]:
        return {
            category.value: obj.counts[category]
            for category in TicketCategory
            if category in obj.counts
        }


class DomainErrorSerializer(serializers.Serializer):
    """Serializer for DomainError; exposes only the code and safe message."""

    code = serializers.SerializerMethodField()
    message = serializers.CharField()

    def get_code(self, obj) -> str:
        return obj.code.value
