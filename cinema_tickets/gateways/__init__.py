from cinema_tickets.gateways.interfaces import (
    SeatReservationService,
    TicketPaymentService,
    TicketPricingService,
)

__all__ = [
    "SeatReservationService",
    "TicketPaymentService",
    "TicketPricingService",
]
