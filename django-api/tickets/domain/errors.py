"""Domain error codes for the tickets module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes, one per purchase rule."""

    INVALID_ACCOUNT_ID = "INVALID_ACCOUNT_ID"
    NO_TICKET_REQUESTS = "NO_TICKET_REQUESTS"
    MISSING_TICKET_REQUEST = "MISSING_TICKET_REQUEST"
    MISSING_TICKET_TYPE = "MISSING_TICKET_TYPE"
    NON_POSITIVE_TICKET_COUNT = "NON_POSITIVE_TICKET_COUNT"
    TICKET_LIMIT_EXCEEDED = "TICKET_LIMIT_EXCEEDED"
    ADULT_TICKET_REQUIRED = "ADULT_TICKET_REQUIRED"
    INFANT_WITHOUT_ADULT = "INFANT_WITHOUT_ADULT"
    INFANTS_EXCEED_ADULTS = "INFANTS_EXCEED_ADULTS"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidPurchaseError(DomainError):
    """Raised when a purchase request breaks one of the purchase rules."""


class InvalidAccountIdError(InvalidPurchaseError):
    """Raised when the account ID is missing or not positive."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT_ID,
            message="Invalid account ID",
        )


class NoTicketRequestsError(InvalidPurchaseError):
    """Raised when no ticket requests are given."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NO_TICKET_REQUESTS,
            message="At least one ticket request is required",
        )


class MissingTicketRequestError(InvalidPurchaseError):
    """Raised when an element of the request sequence is missing."""

    def __init__(self, position: int) -> None:
        super().__init__(
            code=ErrorCode.MISSING_TICKET_REQUEST,
            message="Ticket request is not valid",
        )
        self.position = position


class MissingTicketTypeError(InvalidPurchaseError):
    """Raised when a ticket request has no ticket type."""

    def __init__(self, position: int) -> None:
        super().__init__(
            code=ErrorCode.MISSING_TICKET_TYPE,
            message="Ticket type is required",
        )
        self.position = position


class NonPositiveTicketCountError(InvalidPurchaseError):
    """Raised when a ticket request asks for zero or fewer tickets."""

    def __init__(self, position: int) -> None:
        super().__init__(
            code=ErrorCode.NON_POSITIVE_TICKET_COUNT,
            message="Number of tickets must be positive",
        )
        self.position = position


class TicketLimitExceededError(InvalidPurchaseError):
    """Raised when too many tickets are requested at once."""

    def __init__(self, max_tickets: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_LIMIT_EXCEEDED,
            message=f"Cannot purchase more than {max_tickets} tickets at a time",
        )
        self.max_tickets = max_tickets


class AdultTicketRequiredError(InvalidPurchaseError):
    """Raised when child tickets are bought without an adult ticket."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ADULT_TICKET_REQUIRED,
            message="Child and infant tickets cannot be purchased without an adult ticket",
        )


class InfantWithoutAdultError(InvalidPurchaseError):
    """Raised when infant tickets are bought with no adult ticket at all."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INFANT_WITHOUT_ADULT,
            message="Infant tickets cannot be purchased without an adult ticket",
        )


class InfantsExceedAdultsError(InvalidPurchaseError):
    """Raised when there are more infant tickets than adult tickets."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INFANTS_EXCEED_ADULTS,
            message="Cannot have more infant tickets than adult tickets",
        )
