"""Serializers for purchase payloads and quote responses.

Input serializers check the payload format only. Nulls are let through so
the purchase rules in the service decide how to reject them.
"""

from rest_framework import serializers

from tickets.domain.models import TicketType, TicketTypeRequest


class TicketRequestSerializer(serializers.Serializer):
    """Serializer for a single ticket type request."""

    type = serializers.ChoiceField(
        choices=[ticket_type.value for ticket_type in TicketType],
        allow_null=True,
    )
    count = serializers.IntegerField()


class PurchaseRequestSerializer(serializers.Serializer):
    """Serializer for a purchase or quote request body."""

    account_id = serializers.IntegerField(allow_null=True, required=False)
    tickets = serializers.ListField(
        child=TicketRequestSerializer(allow_null=True),
        allow_null=True,
        required=False,
    )

    def account_id_value(self) -> int | None:
        return self.validated_data.get("account_id")

    def ticket_requests(self) -> list[TicketTypeRequest | None] | None:
        items = self.validated_data.get("tickets")
        if items is None:
            return None
        return [self._to_domain(item) for item in items]

    @staticmethod
    def _to_domain(item) -> TicketTypeRequest | None:
        if item is None:
            return None
        ticket_type = TicketType(item["type"]) if item["type"] is not None else None
        return TicketTypeRequest(ticket_type=ticket_type, count=item["count"])


class PurchaseSummarySerializer(serializers.Serializer):
    """Serializer for the PurchaseSummary domain model."""

    adults = serializers.IntegerField()
    children = serializers.IntegerField()
    infants = serializers.IntegerField()
    total_seats = serializers.IntegerField(source="total_seats.value")
    total_price = serializers.IntegerField(source="total_price.amount")
