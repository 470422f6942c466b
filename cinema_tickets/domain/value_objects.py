"""Domain primitives that enforce validity at creation time."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Self


class TicketCategory(Enum):
    """Admission categories. Determines unit price and seat occupancy."""

    INFANT = "INFANT"
    CHILD = "CHILD"
    ADULT = "ADULT"


@dataclass(frozen=True)
class TicketTypeRequest:
    """A number of tickets of one category.

    The quantity is taken as supplied; zero and negative values are allowed
    here and dealt with by the validator and the price calculator.
    """

    category: TicketCategory
    quantity: int


@dataclass(frozen=True)
class TicketCounts:
    """Quantities summed per category across a set of requests."""

    adults: int = 0
    children: int = 0
    infants: int = 0

    @classmethod
    def from_requests(cls, ticket_type_requests: Iterable[TicketTypeRequest]) -> Self:
        adults = children = infants = 0
        for request in ticket_type_requests:
            match request.category:
                case TicketCategory.ADULT:
                    adults += request.quantity
                case TicketCategory.CHILD:
                    children += request.quantity
                case TicketCategory.INFANT:
                    infants += request.quantity
        return cls(adults=adults, children=children, infants=infants)

    @property
    def total(self) -> int:
        return self.adults + self.children + self.infants

    @property
    def seats(self) -> int:
        """Infants sit on an adult's lap and take no seat."""
        return self.adults + self.children


@dataclass(frozen=True)
class PriceTable:
    """Unit price per ticket category, in whole currency units."""

    infant: int = 0
    child: int = 10
    adult: int = 20

    def __post_init__(self) -> None:
        for category in TicketCategory:
            if self.unit_price(category) < 0:
                raise ValueError(f"{category.value} price cannot be negative")

    @classmethod
    def from_mapping(cls, prices: Mapping[TicketCategory, int]) -> Self:
        missing = [category.value for category in TicketCategory if category not in prices]
        if missing:
            raise ValueError(f"Missing prices for: {', '.join(missing)}")
        return cls(
            infant=prices[TicketCategory.INFANT],
            child=prices[TicketCategory.CHILD],
            adult=prices[TicketCategory.ADULT],
        )

    def unit_price(self, category: TicketCategory) -> int:
        match category:
            case TicketCategory.INFANT:
                return self.infant
            case TicketCategory.CHILD:
                return self.child
            case TicketCategory.ADULT:
                return self.adult
