"""Pytest configuration and shared fixtures."""

import pytest

from purchases.domain import TicketCategory, TicketRequest
from purchases.gateways.interfaces import PaymentGateway, SeatReservationGateway
from purchases.services import ReservationCalculator, TicketPurchaseService


class RecordingPaymentGateway(PaymentGateway):
    def __init__(self, calls: list, error: Exception | None = None) -> None:
        self.calls = calls
        self.error = error

    def charge(self, account_id: int, amount: int) -> None:
        self.calls.append(("charge", account_id, amount))
        if self.error is not None:
            raise self.error


class RecordingSeatReservationGateway(SeatReservationGateway):
    def __init__(self, calls: list, error: Exception | None = None) -> None:
        self.calls = calls
        self.error = error

    def reserve(self, account_id: int, seat_count: int) -> None:
        self.calls.append(("reserve", account_id, seat_count))
        if self.error is not None:
            raise self.error


@pytest.fixture
def gateway_calls() -> list:
    return []


@pytest.fixture
def payment_gateway(gateway_calls) -> RecordingPaymentGateway:
    return RecordingPaymentGateway(gateway_calls)


@pytest.fixture
def seat_gateway(gateway_calls) -> RecordingSeatReservationGateway:
    return RecordingSeatReservationGateway(gateway_calls)


@pytest.fixture
def purchase_service(payment_gateway, seat_gateway) -> TicketPurchaseService:
    return TicketPurchaseService(payment_gateway=payment_gateway, seat_gateway=seat_gateway)


@pytest.fixture
def calculator() -> ReservationCalculator:
    return ReservationCalculator()


def _build_tickets(adult: int = 0, child: int = 0, infant: int = 0) -> list[TicketRequest]:
    """Build one request per non-zero category."""
    wanted = [
        (TicketCategory.ADULT, adult),
        (TicketCategory.CHILD, child),
        (TicketCategory.INFANT, infant),
    ]
    return [TicketRequest(category, count) for category, count in wanted if count]


@pytest.fixture
def make_tickets():
    return _build_tickets
