"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from tickets.conf import build_ticket_service
from tickets.domain.errors import DomainError
from tickets.handlers.serializers import PurchaseRequestSerializer, PurchaseSummarySerializer


def domain_error_response(error: DomainError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=status.HTTP_400_BAD_REQUEST,
    )


class PurchaseView(APIView):
    """Handler for POST /api/purchases"""

    def post(self, request: Request) -> Response:
        serializer = PurchaseRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        service = build_ticket_service()
        try:
            service.purchase_tickets(serializer.account_id_value(), serializer.ticket_requests())
        except DomainError as exc:
            return domain_error_response(exc)
        return Response(status=status.HTTP_204_NO_CONTENT)


class QuoteView(APIView):
    """Handler for POST /api/purchases/quote"""

    def post(self, request: Request) -> Response:
        serializer = PurchaseRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        service = build_ticket_service()
        try:
            summary = service.quote(serializer.account_id_value(), serializer.ticket_requests())
        except DomainError as exc:
            return domain_error_response(exc)
        return Response(PurchaseSummarySerializer(summary).data)
