"""Domain models for a ticket purchase.

These are pure domain objects; business rules live in the services.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Self

from cinema_tickets.domain.value_objects import TicketTypeRequest


@dataclass(frozen=True)
class PurchaseRequest:
    """Domain representation of a request to buy tickets for one account."""

    account_id: int
    ticket_type_requests: tuple[TicketTypeRequest, ...] = ()

    @classmethod
    def create(cls, account_id: int, ticket_type_requests: Iterable[TicketTypeRequest]) -> Self:
        return cls(account_id=account_id, ticket_type_requests=tuple(ticket_type_requests))
