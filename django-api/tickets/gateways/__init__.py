from tickets.gateways.interfaces import SeatReservationGateway, TicketPaymentGateway
from tickets.gateways.local import LoggingPaymentGateway, LoggingSeatReservationGateway

__all__ = [
    "TicketPaymentGateway",
    "SeatReservationGateway",
    "LoggingPaymentGateway",
    "LoggingSeatReservationGateway",
]
