"""Aggregation and totals over ticket requests."""

from collections import Counter
from types import MappingProxyType
from typing import Iterable, Mapping

from purchases.domain.catalog import entry_for
from purchases.domain.value_objects import TicketCategory, TicketRequest


def aggregate_counts(requests: Iterable[TicketRequest]) -> Mapping[TicketCategory, int]:
    """Sum ticket counts per category.

    Only categories present in ``requests`` appear as keys.
    """
    totals: Counter[TicketCategory] = Counter()
    for request in requests:
        totals[request.category] += request.count
    return MappingProxyType(dict(totals))


def price_of(counts: Mapping[TicketCategory, int]) -> int:
    return sum(count * entry_for(category).unit_price for category, count in counts.items())


def seats_required(counts: Mapping[TicketCategory, int]) -> int:
    return sum(
        count for category, count in counts.items() if entry_for(category).requires_seat
    )
