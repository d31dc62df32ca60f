from purchases.domain.catalog import MAX_SEATS_PER_PURCHASE, CatalogEntry, entry_for
from purchases.domain.models import Reservation
from purchases.domain.pricing import aggregate_counts, price_of, seats_required
from purchases.domain.value_objects import TicketCategory, TicketRequest

__all__ = [
    "Reservation",
    "TicketCategory",
    "TicketRequest",
    "CatalogEntry",
    "MAX_SEATS_PER_PURCHASE",
    "entry_for",
    "aggregate_counts",
    "price_of",
    "seats_required",
]
