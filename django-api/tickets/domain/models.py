"""Domain models for ticket purchases.

These are pure domain objects with no API input rules and no persistence.
Purchase summaries are computed per request and discarded afterwards.
"""

from dataclasses import dataclass
from enum import Enum

from tickets.domain.value_objects import Money, SeatCount


class TicketType(Enum):
    """Closed set of ticket categories."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @property
    def occupies_seat(self) -> bool:
        """Infants sit on an adult's lap."""
        return self is not TicketType.INFANT


@dataclass(frozen=True)
class TicketTypeRequest:
    """A request for a number of tickets of one type.

    Not validated on construction: the purchase service rejects a missing
    type or a non-positive count with the matching domain error.
    """

    ticket_type: TicketType | None
    count: int


@dataclass(frozen=True)
class PricingRules:
    """Unit prices and the per-purchase ticket cap.

    Infant tickets are always free and are not configurable.
    """

    adult_price: int = 25
    child_price: int = 15
    max_tickets: int = 25

    def __post_init__(self) -> None:
        if self.child_price < 1:
            raise ValueError("Child price must be positive")
        if self.adult_price <= self.child_price:
            raise ValueError("Adult price must be greater than child price")
        if self.max_tickets < 1:
            raise ValueError("Maximum tickets per purchase must be at least 1")

    def price_of(self, ticket_type: TicketType) -> Money:
        prices = {
            TicketType.ADULT: self.adult_price,
            TicketType.CHILD: self.child_price,
            TicketType.INFANT: 0,
        }
        return Money(prices[ticket_type])


@dataclass(frozen=True)
class PurchaseSummary:
    """Aggregated counts and totals for a validated purchase request."""

    adults: int
    children: int
    infants: int
    total_seats: SeatCount
    total_price: Money

    @property
    def total_tickets(self) -> int:
        return self.adults + self.children + self.infants
