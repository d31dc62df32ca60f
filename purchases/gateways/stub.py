"""Stand-ins for the third-party payment and seat-booking services.

They check argument types and ranges and log the call; no money moves and
no seat is held.
"""

import logging

from purchases.gateways.interfaces import PaymentGateway, SeatReservationGateway

logger = logging.getLogger(__name__)


def _require_int(name: str, value: object, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")
    if value < minimum:
        raise ValueError(f"{name} must be at least {minimum}")


class StubPaymentGateway(PaymentGateway):
    """Payment gateway that accepts every charge."""

    def charge(self, account_id: int, amount: int) -> None:
        _require_int("account_id", account_id, 1)
        _require_int("amount", amount, 0)
        logger.info("Charged %s to account %s", amount, account_id)


class StubSeatReservationGateway(SeatReservationGateway):
    """Seat gateway that accepts every reservation."""

    def reserve(self, account_id: int, seat_count: int) -> None:
        _require_int("account_id", account_id, 1)
        _require_int("seat_count", seat_count, 0)
        logger.info("Reserved %s seats for account %s", seat_count, account_id)
