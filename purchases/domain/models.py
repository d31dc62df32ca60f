"""Domain models for ticket purchases.

These are pure domain objects. Instances are built by
ReservationCalculator once every purchase rule has passed.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from purchases.domain.value_objects import TicketCategory


@dataclass(frozen=True)
class Reservation:
    """A validated, priced set of tickets for one account.

    ``counts`` is copied into a read-only mapping on construction, so a
    Reservation is hashable and cannot change after it is built.
    """

    account_id: int
    counts: Mapping[TicketCategory, int]
    total_price: int
    total_seats: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "counts", MappingProxyType(dict(self.counts)))

    def __hash__(self) -> int:
        return hash(
            (
                self.account_id,
                frozenset(self.counts.items()),
                self.total_price,
                self.total_seats,
            )
        )

    def count(self, category: TicketCategory) -> int:
        """Return how many tickets of a category were reserved."""
        return self.counts.get(category, 0)
