"""Validation, pricing and purchase of cinema tickets."""

from cinema_tickets.config import TicketSettings, configure_logging
from cinema_tickets.domain import (
    ErrorCode,
    InvalidPurchaseError,
    PriceTable,
    PurchaseRequest,
    TicketCategory,
    TicketTypeRequest,
)
from cinema_tickets.gateways import SeatReservationService, TicketPaymentService
from cinema_tickets.services import PriceCalculator, RequestValidator, TicketService


def build_ticket_service(
    payment_service: TicketPaymentService,
    seat_reservation_service: SeatReservationService,
    settings: TicketSettings | None = None,
) -> TicketService:
    """Wire a TicketService from settings, pricing by the configured price table.

    Logging is left to the caller; see configure_logging.
    """
    settings = settings or TicketSettings()
    return TicketService(
        payment_service=payment_service,
        seat_reservation_service=seat_reservation_service,
        pricing_service=PriceCalculator(settings.price_table()),
    )


__all__ = [
    "ErrorCode",
    "InvalidPurchaseError",
    "PriceCalculator",
    "PriceTable",
    "PurchaseRequest",
    "RequestValidator",
    "SeatReservationService",
    "TicketCategory",
    "TicketPaymentService",
    "TicketService",
    "TicketSettings",
    "TicketTypeRequest",
    "build_ticket_service",
    "configure_logging",
]
