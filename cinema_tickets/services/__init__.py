from cinema_tickets.services.price_calculator import PriceCalculator
from cinema_tickets.services.request_validator import RequestValidator
from cinema_tickets.services.ticket_service import TicketService

__all__ = [
    "PriceCalculator",
    "RequestValidator",
    "TicketService",
]
