"""Purchase validation - the business rules for an admissible request.

Checks run in a fixed order so the most basic problem is reported first:
account id, then negative counts, then the capacity and accompaniment rules.
"""

from collections.abc import Iterable

from cinema_tickets.config import PurchaseLimits
from cinema_tickets.domain import ErrorCode, InvalidPurchaseError, TicketCounts, TicketTypeRequest


class RequestValidator:
    """Accepts or rejects a purchase as a whole."""

    def __init__(self, max_tickets: int = PurchaseLimits.MAX_TICKETS_PER_PURCHASE) -> None:
        self._max_tickets = max_tickets

    def validate(self, account_id: int, ticket_type_requests: Iterable[TicketTypeRequest]) -> TicketCounts:
        """Return the per-category counts of an admissible request.

        Entries of the same category are summed before any rule is applied.

        Raises:
            InvalidPurchaseError: With the code of the first rule broken.
        """
        if account_id < PurchaseLimits.MIN_ACCOUNT_ID:
            raise InvalidPurchaseError(ErrorCode.INVALID_ACCOUNT_ID)

        counts = TicketCounts.from_requests(ticket_type_requests)
        self._validate_counts(counts)
        return counts

    def _validate_counts(self, counts: TicketCounts) -> None:
        if counts.adults < 0:
            raise InvalidPurchaseError(ErrorCode.NEGATIVE_ADULT_COUNT)
        if counts.children < 0:
            raise InvalidPurchaseError(ErrorCode.NEGATIVE_CHILD_COUNT)
        if counts.infants < 0:
            raise InvalidPurchaseError(ErrorCode.NEGATIVE_INFANT_COUNT)
        if counts.total > self._max_tickets:
            raise InvalidPurchaseError(ErrorCode.MAX_TICKETS_EXCEEDED)
        if counts.children + counts.infants > 0 and counts.adults == 0:
            raise InvalidPurchaseError(ErrorCode.ADULT_REQUIRED)
        if counts.infants > counts.adults:
            raise InvalidPurchaseError(ErrorCode.INSUFFICIENT_ADULT_LAPS)
