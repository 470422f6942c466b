"""Unit tests for PriceCalculator.

Run with: pytest tests/test_price_calculator.py -v
"""

import pytest

from cinema_tickets.domain import PriceTable, TicketCategory, TicketTypeRequest
from cinema_tickets.services import PriceCalculator

ADULT = TicketCategory.ADULT
CHILD = TicketCategory.CHILD
INFANT = TicketCategory.INFANT


@pytest.fixture
def calculator() -> PriceCalculator:
    return PriceCalculator(PriceTable(infant=0, child=10, adult=20))


class TestPriceCalculator:
    """Tests for PriceCalculator.price."""

    def test_empty_requests_cost_nothing(self, calculator):
        """An empty request costs 0."""
        assert calculator.price([]) == 0

    def test_non_positive_quantities_cost_nothing(self, calculator):
        """Zero and negative entries add nothing."""
        requests = [
            TicketTypeRequest(ADULT, -1),
            TicketTypeRequest(CHILD, -1),
            TicketTypeRequest(INFANT, -1),
            TicketTypeRequest(ADULT, 0),
        ]
        assert calculator.price(requests) == 0

    @pytest.mark.parametrize(
        "category, expected",
        [(ADULT, 20), (CHILD, 10), (INFANT, 0)],
    )
    def test_single_ticket_prices(self, calculator, category, expected):
        """One ticket costs its category's unit price."""
        assert calculator.price([TicketTypeRequest(category, 1)]) == expected

    def test_mixed_purchase(self, calculator):
        """Adults, children and infants are priced together."""
        requests = [
            TicketTypeRequest(ADULT, 3),
            TicketTypeRequest(CHILD, 10),
            TicketTypeRequest(INFANT, 2),
        ]
        assert calculator.price(requests) == 160

    def test_filters_each_entry_on_its_own_sign(self, calculator):
        """A negative entry is dropped, not netted against a positive one of the same category."""
        requests = [TicketTypeRequest(ADULT, 2), TicketTypeRequest(ADULT, -1)]
        assert calculator.price(requests) == 40

    def test_negative_entry_dropped_even_when_category_total_is_negative(self, calculator):
        """The positive entry is charged even if the category sum is negative."""
        requests = [TicketTypeRequest(CHILD, 1), TicketTypeRequest(CHILD, -5)]
        assert calculator.price(requests) == 10

    def test_is_repeatable(self, calculator):
        """Pricing the same requests twice gives the same total."""
        requests = [TicketTypeRequest(ADULT, 2), TicketTypeRequest(CHILD, 1)]
        assert calculator.price(requests) == calculator.price(requests) == 50

    def test_uses_supplied_price_table(self):
        """Prices come from the table given at construction."""
        calculator = PriceCalculator(PriceTable(infant=3, child=7, adult=11))
        requests = [
            TicketTypeRequest(ADULT, 1),
            TicketTypeRequest(CHILD, 1),
            TicketTypeRequest(INFANT, 1),
        ]
        assert calculator.price(requests) == 21

    def test_defaults_to_standard_price_table(self):
        """Without a table the standard prices apply."""
        assert PriceCalculator().price([TicketTypeRequest(ADULT, 1), TicketTypeRequest(CHILD, 1)]) == 30
