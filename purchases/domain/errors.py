"""Domain error codes for the purchases module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ACCOUNT = "INVALID_ACCOUNT"
    EMPTY_REQUEST = "EMPTY_REQUEST"
    INVALID_TICKET_REQUEST = "INVALID_TICKET_REQUEST"
    TICKET_LIMIT_EXCEEDED = "TICKET_LIMIT_EXCEEDED"
    ADULT_REQUIRED = "ADULT_REQUIRED"
    TOO_MANY_INFANTS = "TOO_MANY_INFANTS"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidPurchaseError(DomainError):
    """Base for every rule that rejects a purchase."""


class InvalidAccountError(InvalidPurchaseError):
    """Raised when the account ID is missing, not an integer, or below 1."""

    def __init__(self, account_id: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT,
            message="Account ID must be an integer greater than 0",
        )
        self.account_id = account_id


class EmptyRequestError(InvalidPurchaseError):
    """Raised when a purchase carries no ticket requests."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EMPTY_REQUEST,
            message="At least one ticket request is required",
        )


class InvalidTicketRequestError(InvalidPurchaseError):
    """Raised when a single ticket request is malformed."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_REQUEST,
            message=f"Invalid ticket request: {reason}",
        )
        self.reason = reason


class TicketLimitExceededError(InvalidPurchaseError):
    """Raised when a purchase needs more seats than allowed at once."""

    def __init__(self, seat_count: int, limit: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_LIMIT_EXCEEDED,
            message=f"Only {limit} tickets can be purchased at a time",
        )
        self.seat_count = seat_count
        self.limit = limit


class AdultRequiredError(InvalidPurchaseError):
    """Raised when child or infant tickets are bought without an adult."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ADULT_REQUIRED,
            message="Child and infant tickets require at least one adult ticket",
        )


class TooManyInfantsError(InvalidPurchaseError):
    """Raised when there are more infants than adult laps to hold them."""

    def __init__(self, infant_count: int, adult_count: int) -> None:
        super().__init__(
            code=ErrorCode.TOO_MANY_INFANTS,
            message="Each infant must be accompanied by its own adult",
        )
        self.infant_count = infant_count
        self.adult_count = adult_count
