"""Settings access for the tickets app.

Everything is read from the ``TICKETS`` dict in Django settings; missing
keys fall back to the defaults below.
"""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from tickets.domain.models import PricingRules
from tickets.services.ticket_service import TicketService

DEFAULTS = {
    "ADULT_PRICE": 25,
    "CHILD_PRICE": 15,
    "MAX_TICKETS_PER_PURCHASE": 25,
    "PAYMENT_GATEWAY": "tickets.gateways.local.LoggingPaymentGateway",
    "SEAT_RESERVATION_GATEWAY": "tickets.gateways.local.LoggingSeatReservationGateway",
}


def get_setting(name: str):
    return getattr(settings, "TICKETS", {}).get(name, DEFAULTS[name])


def get_pricing_rules() -> PricingRules:
    """Build the pricing rules from settings.

    Raises:
        ImproperlyConfigured: If the configured prices or cap are invalid.
    """
    if getattr(settings, "TICKETS", {}).get("INFANT_PRICE", 0) != 0:
        raise ImproperlyConfigured("Infant tickets are free; INFANT_PRICE cannot be set")
    try:
        return PricingRules(
            adult_price=get_setting("ADULT_PRICE"),
            child_price=get_setting("CHILD_PRICE"),
            max_tickets=get_setting("MAX_TICKETS_PER_PURCHASE"),
        )
    except (TypeError, ValueError) as exc:
        raise ImproperlyConfigured(f"Invalid TICKETS pricing settings: {exc}") from exc


def build_ticket_service() -> TicketService:
    """Wire a TicketService with the configured gateways and rules."""
    payment_gateway = import_string(get_setting("PAYMENT_GATEWAY"))
    reservation_gateway = import_string(get_setting("SEAT_RESERVATION_GATEWAY"))
    return TicketService(
        payment_gateway=payment_gateway(),
        reservation_gateway=reservation_gateway(),
        rules=get_pricing_rules(),
    )
