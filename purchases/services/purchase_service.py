"""Purchase service - sequences the calculator against the gateways.

Services:
- Depend only on interfaces (gateways)
- Let domain errors from the calculator propagate unchanged
- Never call a gateway for a rejected purchase

Gateway failures are not caught. A seat reservation that fails after a
successful charge is not refunded.
"""

import logging

from purchases.conf import get_payment_gateway, get_seat_reservation_gateway
from purchases.domain.errors import InvalidPurchaseError
from purchases.domain.models import Reservation
from purchases.domain.value_objects import TicketRequest
from purchases.gateways.interfaces import PaymentGateway, SeatReservationGateway
from purchases.services.reservation_calculator import ReservationCalculator

logger = logging.getLogger(__name__)


class TicketPurchaseService:
    """Service for buying tickets on behalf of an account."""

    def __init__(
        self,
        payment_gateway: PaymentGateway,
        seat_gateway: SeatReservationGateway,
        calculator: ReservationCalculator | None = None,
    ) -> None:
        self._payment_gateway = payment_gateway
        self._seat_gateway = seat_gateway
        self._calculator = calculator or ReservationCalculator()

    def purchase_tickets(self, account_id: int, *ticket_requests: TicketRequest) -> Reservation:
        """Charge for and reserve the requested tickets.

        Raises:
            InvalidPurchaseError: If the requests break a purchase rule.
        """
        try:
            reservation = self._calculator.calculate(account_id, ticket_requests)
        except InvalidPurchaseError as exc:
            logger.warning(
                "Purchase rejected for account %r: %s", account_id, exc.code.value
            )
            raise

        self._payment_gateway.charge(account_id, reservation.total_price)
        self._seat_gateway.reserve(account_id, reservation.total_seats)

        logger.info(
            "Purchase completed for account %s: %s seats, price %s",
            account_id,
            reservation.total_seats,
            reservation.total_price,
        )
        return reservation


def build_purchase_service() -> TicketPurchaseService:
    """Return a TicketPurchaseService wired with the configured gateways."""
    return TicketPurchaseService(
        payment_gateway=get_payment_gateway(),
        seat_gateway=get_seat_reservation_gateway(),
    )
