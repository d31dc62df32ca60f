"""Settings for the purchases app.

Read from ``settings.PURCHASES`` at call time so tests can override them::

    PURCHASES = {
        "PAYMENT_GATEWAY": "purchases.gateways.stub.StubPaymentGateway",
        "SEAT_RESERVATION_GATEWAY": "purchases.gateways.stub.StubSeatReservationGateway",
    }
"""

from typing import Any

from django.conf import settings
from django.utils.module_loading import import_string

from purchases.gateways.interfaces import PaymentGateway, SeatReservationGateway

DEFAULTS = {
    "PAYMENT_GATEWAY": "purchases.gateways.stub.StubPaymentGateway",
    "SEAT_RESERVATION_GATEWAY": "purchases.gateways.stub.StubSeatReservationGateway",
}


def get_setting(name: str) -> Any:
    user_settings = getattr(settings, "PURCHASES", None) or {}
    return user_settings.get(name, DEFAULTS[name])


def get_payment_gateway() -> PaymentGateway:
    return import_string(get_setting("PAYMENT_GATEWAY"))()


def get_seat_reservation_gateway() -> SeatReservationGateway:
    return import_string(get_setting("SEAT_RESERVATION_GATEWAY"))()
