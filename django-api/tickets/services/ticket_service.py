"""Ticket service - all purchase business logic lives here.

Services:
- Depend only on interfaces (gateways)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections import Counter
from collections.abc import Sequence

from tickets.domain.errors import (
    AdultTicketRequiredError,
    InfantsExceedAdultsError,
    InfantWithoutAdultError,
    InvalidAccountIdError,
    InvalidPurchaseError,
    MissingTicketRequestError,
    MissingTicketTypeError,
    NonPositiveTicketCountError,
    NoTicketRequestsError,
    TicketLimitExceededError,
)
from tickets.domain.models import PricingRules, PurchaseSummary, TicketType, TicketTypeRequest
from tickets.domain.value_objects import AccountId, Money, SeatCount, is_whole_number
from tickets.gateways.interfaces import SeatReservationGateway, TicketPaymentGateway

logger = logging.getLogger(__name__)

TicketRequests = Sequence[TicketTypeRequest | None] | None


class TicketService:
    """Service for validating, pricing and purchasing tickets."""

    def __init__(
        self,
        payment_gateway: TicketPaymentGateway,
        reservation_gateway: SeatReservationGateway,
        rules: PricingRules | None = None,
    ) -> None:
        self._payment_gateway = payment_gateway
        self._reservation_gateway = reservation_gateway
        self._rules = rules or PricingRules()

    @property
    def rules(self) -> PricingRules:
        return self._rules

    def purchase_tickets(self, account_id: int | None, ticket_type_requests: TicketRequests) -> None:
        """Validate and price the requests, then pay and reserve seats.

        Payment is always taken before seats are reserved. Nothing is sent
        to either gateway unless every rule passes, and gateway failures
        propagate unchanged.

        Raises:
            InvalidPurchaseError: If any purchase rule is broken.
        """
        summary = self.quote(account_id, ticket_type_requests)

        self._payment_gateway.make_payment(account_id, summary.total_price.amount)
        self._reservation_gateway.reserve_seat(account_id, summary.total_seats.value)
        logger.info(
            "Account %s purchased %s tickets for %s, %s seats reserved",
            account_id,
            summary.total_tickets,
            summary.total_price.amount,
            summary.total_seats.value,
        )

    def quote(self, account_id: int | None, ticket_type_requests: TicketRequests) -> PurchaseSummary:
        """Validate the account and requests and return the priced summary.

        Raises:
            InvalidPurchaseError: If any purchase rule is broken.
        """
        try:
            self._validate_account_id(account_id)
        except InvalidPurchaseError as exc:
            logger.info("Rejected purchase: %s", exc)
            raise
        return self.price_tickets(ticket_type_requests)

    def price_tickets(self, ticket_type_requests: TicketRequests) -> PurchaseSummary:
        """Validate the requests and aggregate them into a summary.

        Raises:
            InvalidPurchaseError: If any request or aggregate rule is broken.
        """
        try:
            counts = self._count_tickets(ticket_type_requests)
            summary = self._summarise(counts)
            self._validate_summary(summary)
        except InvalidPurchaseError as exc:
            logger.info("Rejected purchase: %s", exc)
            raise
        return summary

    def _validate_account_id(self, account_id: int | None) -> None:
        try:
            AccountId.from_value(account_id)
        except (TypeError, ValueError) as exc:
            raise InvalidAccountIdError() from exc

    def _count_tickets(self, ticket_type_requests: TicketRequests) -> Counter[TicketType]:
        if not ticket_type_requests:
            raise NoTicketRequestsError()

        counts: Counter[TicketType] = Counter()
        for position, request in enumerate(ticket_type_requests):
            if request is None:
                raise MissingTicketRequestError(position)
            if not isinstance(request.ticket_type, TicketType):
                raise MissingTicketTypeError(position)
            if not is_whole_number(request.count) or request.count < 1:
                raise NonPositiveTicketCountError(position)
            counts[request.ticket_type] += request.count
        return counts

    def _summarise(self, counts: Counter[TicketType]) -> PurchaseSummary:
        total_price = Money(0)
        for ticket_type, count in counts.items():
            total_price += self._rules.price_of(ticket_type).times(count)

        return PurchaseSummary(
            adults=counts[TicketType.ADULT],
            children=counts[TicketType.CHILD],
            infants=counts[TicketType.INFANT],
            total_seats=SeatCount(
                sum(count for ticket_type, count in counts.items() if ticket_type.occupies_seat)
            ),
            total_price=total_price,
        )

    def _validate_summary(self, summary: PurchaseSummary) -> None:
        if summary.total_tickets > self._rules.max_tickets:
            raise TicketLimitExceededError(self._rules.max_tickets)
        if summary.adults == 0 and summary.total_seats.value > 0:
            raise AdultTicketRequiredError()
        if summary.infants > 0 and summary.adults == 0:
            raise InfantWithoutAdultError()
        if summary.infants > summary.adults:
            raise InfantsExceedAdultsError()
