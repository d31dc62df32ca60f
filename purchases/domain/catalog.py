"""Fixed ticket price list.

Prices and seat requirements are constants of the product, so the table is
built once at import time and exposed read-only.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from purchases.domain.value_objects import TicketCategory

MAX_SEATS_PER_PURCHASE = 20


@dataclass(frozen=True)
class CatalogEntry:
    """Unit price and seat requirement of a ticket category."""

    unit_price: int
    requires_seat: bool

    def __post_init__(self) -> None:
        if self.unit_price < 0:
            raise ValueError("Unit price cannot be negative")


CATALOG: Mapping[TicketCategory, CatalogEntry] = MappingProxyType(
    {
        TicketCategory.ADULT: CatalogEntry(unit_price=20, requires_seat=True),
        TicketCategory.CHILD: CatalogEntry(unit_price=10, requires_seat=True),
        # Infants sit on an adult's lap.
        TicketCategory.INFANT: CatalogEntry(unit_price=0, requires_seat=False),
    }
)


def entry_for(category: TicketCategory) -> CatalogEntry:
    """Return the catalog entry for a ticket category."""
    return CATALOG[category]
