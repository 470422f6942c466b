from cinema_tickets.domain.errors import DomainError, ErrorCode, InvalidPurchaseError
from cinema_tickets.domain.models import PurchaseRequest
from cinema_tickets.domain.value_objects import (
    PriceTable,
    TicketCategory,
    TicketCounts,
    TicketTypeRequest,
)

__all__ = [
    "DomainError",
    "ErrorCode",
    "InvalidPurchaseError",
    "PurchaseRequest",
    "PriceTable",
    "TicketCategory",
    "TicketCounts",
    "TicketTypeRequest",
]
