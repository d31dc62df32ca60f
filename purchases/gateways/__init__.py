from purchases.gateways.interfaces import PaymentGateway, SeatReservationGateway
from purchases.gateways.stub import StubPaymentGateway, StubSeatReservationGateway

__all__ = [
    "PaymentGateway",
    "SeatReservationGateway",
    "StubPaymentGateway",
    "StubSeatReservationGateway",
]
