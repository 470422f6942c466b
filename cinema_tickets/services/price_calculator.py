"""Default pricing model: a flat unit price per ticket category."""

from collections.abc import Sequence

from cinema_tickets.domain import PriceTable, TicketTypeRequest
from cinema_tickets.gateways import TicketPricingService


class PriceCalculator(TicketPricingService):
    """Prices requests against a fixed price table.

    Performs no validation other than discarding entries with a zero or
    negative quantity. Each entry is kept or dropped on its own sign, so a
    negative entry never offsets a positive one of the same category.
    """

    def __init__(self, price_table: PriceTable | None = None) -> None:
        self._price_table = price_table or PriceTable()

    def price(self, ticket_type_requests: Sequence[TicketTypeRequest]) -> int:
        return sum(
            self._price_table.unit_price(request.category) * request.quantity
            for request in ticket_type_requests
            if request.quantity > 0
        )
