"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self

from purchases.domain.errors import InvalidTicketRequestError


class TicketCategory(Enum):
    """The fixed set of ticket kinds that can be purchased."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @classmethod
    def from_string(cls, value: str) -> Self:
        try:
            return cls(value.upper())
        except (AttributeError, ValueError):
            raise InvalidTicketRequestError(f"unknown ticket category {value!r}") from None


@dataclass(frozen=True)
class TicketRequest:
    """A number of tickets of one category, as asked for by the caller."""

    category: TicketCategory
    count: int

    def __post_init__(self) -> None:
        if not isinstance(self.category, TicketCategory):
            object.__setattr__(
                self, "category", TicketCategory.from_string(self.category)
            )
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise InvalidTicketRequestError("ticket count must be an integer")
        if self.count < 1:
            raise InvalidTicketRequestError("ticket count must be at least 1")

    @classmethod
    def of(cls, category: "TicketCategory | str", count: int) -> Self:
        return cls(category=category, count=count)
