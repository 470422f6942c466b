"""Collaborator interfaces.

The payment gateway and the seat booking service are owned by other teams;
the ticket service only depends on these contracts. Implementations must be
swappable.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from cinema_tickets.domain import TicketTypeRequest


class TicketPaymentService(ABC):
    """Interface for taking payment for a purchase."""

    @abstractmethod
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        """Charge the account. Failures are raised to the caller unchanged."""
        ...


class SeatReservationService(ABC):
    """Interface for reserving seats for a purchase."""

    @abstractmethod
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        """Reserve seats for the account. Failures are raised to the caller unchanged."""
        ...


class TicketPricingService(ABC):
    """Interface for turning ticket requests into an amount to pay."""

    @abstractmethod
    def price(self, ticket_type_requests: Sequence[TicketTypeRequest]) -> int:
        """Return the total price of the requests."""
        ...
