"""Domain error codes for the cinema tickets module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ACCOUNT_ID = "INVALID_ACCOUNT_ID"
    NEGATIVE_ADULT_COUNT = "NEGATIVE_ADULT_COUNT"
    NEGATIVE_CHILD_COUNT = "NEGATIVE_CHILD_COUNT"
    NEGATIVE_INFANT_COUNT = "NEGATIVE_INFANT_COUNT"
    MAX_TICKETS_EXCEEDED = "MAX_TICKETS_EXCEEDED"
    ADULT_REQUIRED = "ADULT_REQUIRED"
    INSUFFICIENT_ADULT_LAPS = "INSUFFICIENT_ADULT_LAPS"


PURCHASE_ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.INVALID_ACCOUNT_ID: "Invalid account id, id is not greater than 0",
    ErrorCode.NEGATIVE_ADULT_COUNT: "Negative number of adult tickets",
    ErrorCode.NEGATIVE_CHILD_COUNT: "Negative number of child tickets",
    ErrorCode.NEGATIVE_INFANT_COUNT: "Negative number of infant tickets",
    ErrorCode.MAX_TICKETS_EXCEEDED: "Attempted to purchase more than the maximum number of tickets",
    ErrorCode.ADULT_REQUIRED: "Child and infant tickets require an adult ticket",
    ErrorCode.INSUFFICIENT_ADULT_LAPS: "More infants than adults, not enough laps",
}


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidPurchaseError(DomainError):
    """Raised when a purchase request breaks a business rule."""

    def __init__(self, code: ErrorCode) -> None:
        super().__init__(
            code=code,
            message=PURCHASE_ERROR_MESSAGES[code],
        )
