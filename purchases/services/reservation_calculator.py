"""Reservation calculator - turns ticket requests into a Reservation.

The calculator:
- Validates the account and the shape of the request list
- Aggregates ticket counts per category
- Applies the purchase rules to the aggregate
- Returns a fully priced Reservation or raises a domain error

It has no side effects and no state, so one instance can be shared.
"""

from typing import Iterable, Mapping

from purchases.domain.catalog import MAX_SEATS_PER_PURCHASE
from purchases.domain.errors import (
    AdultRequiredError,
    EmptyRequestError,
    InvalidAccountError,
    InvalidTicketRequestError,
    TicketLimitExceededError,
    TooManyInfantsError,
)
from purchases.domain.models import Reservation
from purchases.domain.pricing import aggregate_counts, price_of, seats_required
from purchases.domain.value_objects import TicketCategory, TicketRequest


class ReservationCalculator:
    """Validates and prices a batch of ticket requests."""

    max_seats = MAX_SEATS_PER_PURCHASE

    def calculate(
        self, account_id: int, ticket_requests: Iterable[TicketRequest] | None
    ) -> Reservation:
        """Build a Reservation for the account.

        Raises:
            InvalidAccountError: If account_id is not an integer >= 1.
            EmptyRequestError: If no ticket requests were given.
            InvalidTicketRequestError: If an element is not a TicketRequest.
            TicketLimitExceededError: If more than 20 seats are needed.
            AdultRequiredError: If children or infants come without an adult.
            TooManyInfantsError: If there are more infants than adults.
        """
        self._validate_account(account_id)
        if ticket_requests is None:
            raise EmptyRequestError()
        # Iterated more than once below.
        ticket_requests = tuple(ticket_requests)
        if not ticket_requests:
            raise EmptyRequestError()
        for request in ticket_requests:
            if not isinstance(request, TicketRequest):
                raise InvalidTicketRequestError(
                    f"expected a TicketRequest, got {type(request).__name__}"
                )

        counts = aggregate_counts(ticket_requests)
        total_seats = seats_required(counts)
        self._validate_counts(counts, total_seats)

        return Reservation(
            account_id=account_id,
            counts=counts,
            total_price=price_of(counts),
            total_seats=total_seats,
        )

    @staticmethod
    def _validate_account(account_id: object) -> None:
        if isinstance(account_id, bool) or not isinstance(account_id, int):
            raise InvalidAccountError(account_id)
        if account_id < 1:
            raise InvalidAccountError(account_id)

    def _validate_counts(self, counts: Mapping[TicketCategory, int], total_seats: int) -> None:
        adults = counts.get(TicketCategory.ADULT, 0)
        children = counts.get(TicketCategory.CHILD, 0)
        infants = counts.get(TicketCategory.INFANT, 0)

        if total_seats > self.max_seats:
            raise TicketLimitExceededError(seat_count=total_seats, limit=self.max_seats)
        if children + infants > 0 and adults < 1:
            raise AdultRequiredError()
        # Adults are a ceiling on infants, not a seat-by-seat pairing.
        if infants > adults:
            raise TooManyInfantsError(infant_count=infants, adult_count=adults)
