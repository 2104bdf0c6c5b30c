"""In-process gateway implementations.

They stand in for the external payment and seat booking services: arguments
are checked and the call is logged, nothing else happens.
"""

import logging

from tickets.gateways.interfaces import SeatReservationGateway, TicketPaymentGateway

logger = logging.getLogger(__name__)


class LoggingPaymentGateway(TicketPaymentGateway):
    """Payment gateway that records payments in the log."""

    def make_payment(self, account_id: int, amount_to_pay: int) -> None:
        if account_id < 1:
            raise ValueError("Account ID must be positive")
        if amount_to_pay < 0:
            raise ValueError("Amount to pay cannot be negative")
        logger.info("Payment of %s taken from account %s", amount_to_pay, account_id)


class LoggingSeatReservationGateway(SeatReservationGateway):
    """Seat reservation gateway that records reservations in the log."""

    def reserve_seat(self, account_id: int, seats_to_allocate: int) -> None:
        if account_id < 1:
            raise ValueError("Account ID must be positive")
        if seats_to_allocate < 0:
            raise ValueError("Seats to allocate cannot be negative")
        logger.info("Reserved %s seats for account %s", seats_to_allocate, account_id)
