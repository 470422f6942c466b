"""Ticket service - entry point for buying tickets.

Services:
- Depend only on interfaces (gateways)
- Validate the purchase before any side effect
- Take payment, then reserve seats
- Let collaborator failures propagate unchanged
"""

from collections.abc import Iterable

from loguru import logger

from cinema_tickets.domain import InvalidPurchaseError, PurchaseRequest, TicketTypeRequest
from cinema_tickets.gateways import (
    SeatReservationService,
    TicketPaymentService,
    TicketPricingService,
)
from cinema_tickets.services.request_validator import RequestValidator


class TicketService:
    """Service for ticket purchases."""

    def __init__(
        self,
        payment_service: TicketPaymentService,
        seat_reservation_service: SeatReservationService,
        pricing_service: TicketPricingService,
        validator: RequestValidator | None = None,
    ) -> None:
        self._payment_service = payment_service
        self._seat_reservation_service = seat_reservation_service
        self._pricing_service = pricing_service
        self._validator = validator or RequestValidator()

    def purchase(self, account_id: int, ticket_type_requests: Iterable[TicketTypeRequest]) -> None:
        """Validate, pay for and reserve seats for the requested tickets.

        Raises:
            InvalidPurchaseError: If the request breaks a business rule. No
                payment is taken and no seats are reserved.
        """
        self.purchase_request(PurchaseRequest.create(account_id, ticket_type_requests))

    def purchase_request(self, request: PurchaseRequest) -> None:
        """Process an already assembled PurchaseRequest. See purchase()."""
        log = logger.bind(account_id=request.account_id)
        try:
            counts = self._validator.validate(request.account_id, request.ticket_type_requests)
        except InvalidPurchaseError as e:
            log.warning(f'Purchase rejected for account {request.account_id}: {e.code.value}')
            raise

        amount = self._pricing_service.price(request.ticket_type_requests)
        self._payment_service.make_payment(request.account_id, amount)
        self._seat_reservation_service.reserve_seat(request.account_id, counts.seats)
        log.info(
            f'Purchase completed for account {request.account_id}: '
            f'amount={amount} seats={counts.seats} tickets={counts.total}'
        )
