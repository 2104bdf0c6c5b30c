"""Gateway interfaces for the third-party purchase collaborators.

Gateways must be swappable. Their failures are their own and propagate
to the caller untouched.
"""

from abc import ABC, abstractmethod


class TicketPaymentGateway(ABC):
    """Interface for taking payment from an account."""

    @abstractmethod
    def make_payment(self, account_id: int, amount_to_pay: int) -> None:
        """Charge the account the given amount."""
        ...


class SeatReservationGateway(ABC):
    """Interface for reserving seats for an account."""

    @abstractmethod
    def reserve_seat(self, account_id: int, seats_to_allocate: int) -> None:
        """Reserve the given number of seats for the account."""
        ...
