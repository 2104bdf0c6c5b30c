from tickets.domain.models import PricingRules, PurchaseSummary, TicketType, TicketTypeRequest
from tickets.domain.value_objects import AccountId, Money, SeatCount

__all__ = [
    "TicketType",
    "TicketTypeRequest",
    "PricingRules",
    "PurchaseSummary",
    "AccountId",
    "Money",
    "SeatCount",
]
