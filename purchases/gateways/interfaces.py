"""Gateway interfaces for the external payment and seat-booking services.

Gateways must be swappable; the purchase service depends only on these.
"""

from abc import ABC, abstractmethod


class PaymentGateway(ABC):
    """Interface for taking payment from an account."""

    @abstractmethod
    def charge(self, account_id: int, amount: int) -> None:
        """Charge ``amount`` to the account. Raise on failure."""
        ...


class SeatReservationGateway(ABC):
    """Interface for holding seats for an account."""

    @abstractmethod
    def reserve(self, account_id: int, seat_count: int) -> None:
        """Reserve ``seat_count`` seats for the account. Raise on failure."""
        ...
