"""Pytest configuration and shared fixtures."""

import pytest
from loguru import logger

from cinema_tickets.gateways import SeatReservationService, TicketPaymentService


class RecordingPaymentService(TicketPaymentService):
    def __init__(self, calls: list) -> None:
        self.calls = calls
        self.error: Exception | None = None

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        self.calls.append(("make_payment", account_id, total_amount_to_pay))
        if self.error is not None:
            raise self.error


class RecordingSeatReservationService(SeatReservationService):
    def __init__(self, calls: list) -> None:
        self.calls = calls
        self.error: Exception | None = None

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        self.calls.append(("reserve_seat", account_id, total_seats_to_allocate))
        if self.error is not None:
            raise self.error


@pytest.fixture
def calls() -> list:
    """Shared, ordered record of collaborator calls."""
    return []


@pytest.fixture
def payment_service(calls: list) -> RecordingPaymentService:
    return RecordingPaymentService(calls)


@pytest.fixture
def seat_reservation_service(calls: list) -> RecordingSeatReservationService:
    return RecordingSeatReservationService(calls)


@pytest.fixture
def log_messages():
    """Capture loguru records as (level, message, extra) tuples."""
    messages = []
    handler_id = logger.add(
        lambda message: messages.append(
            (message.record["level"].name, message.record["message"], message.record["extra"])
        ),
        level="DEBUG",
    )
    yield messages
    logger.remove(handler_id)
