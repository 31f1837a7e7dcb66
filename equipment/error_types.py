"""
Centralized error types and constants for the equipment subsystem.

The domain raises typed exceptions; this module gives the application layer
one place to translate them into standardized, user-facing error responses.
"""

from datetime import UTC, datetime
from enum import Enum
from typing import Any

from .domain.exceptions import (
    CapacityExceededError,
    DomainError,
    InsufficientFundsError,
    NotFoundError,
    StateTransitionError,
    ValidationError,
)


class ErrorType(Enum):
    """Standardized error types for consistent categorization."""

    VALIDATION_ERROR = "validation_error"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INVALID_STATE_TRANSITION = "invalid_state_transition"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    DUPLICATE_REQUEST = "duplicate_request"
    FORBIDDEN = "forbidden"
    INTERNAL_ERROR = "internal_error"


class ErrorSeverity(Enum):
    """Error severity levels for logging and handling."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorMessages:
    """Common error messages for consistent user experience."""

    INVALID_INPUT = "Invalid input provided"
    NOT_ENOUGH_SPACE = "There is not enough space for that item"
    ITEM_NOT_FOUND = "That item could not be found"
    CONTAINER_NOT_FOUND = "That inventory or store could not be found"
    CANNOT_CHANGE_STATUS = "You cannot do that with this item right now"
    NOT_ENOUGH_MONEY = "You do not have enough money"
    DUPLICATE_REQUEST = "That request was already processed"
    CANNOT_BUY_OWN_ITEM = "You cannot buy items from your own store"
    INTERNAL_ERROR = "An internal error occurred"


# Subclasses first: InsufficientFundsError is also a ValidationError.
_DOMAIN_ERROR_MAP: list[tuple[type[DomainError], ErrorType, str, ErrorSeverity]] = [
    (InsufficientFundsError, ErrorType.INSUFFICIENT_FUNDS, ErrorMessages.NOT_ENOUGH_MONEY, ErrorSeverity.LOW),
    (CapacityExceededError, ErrorType.CAPACITY_EXCEEDED, ErrorMessages.NOT_ENOUGH_SPACE, ErrorSeverity.LOW),
    (NotFoundError, ErrorType.RESOURCE_NOT_FOUND, ErrorMessages.ITEM_NOT_FOUND, ErrorSeverity.LOW),
    (StateTransitionError, ErrorType.INVALID_STATE_TRANSITION, ErrorMessages.CANNOT_CHANGE_STATUS, ErrorSeverity.LOW),
    (ValidationError, ErrorType.VALIDATION_ERROR, ErrorMessages.INVALID_INPUT, ErrorSeverity.MEDIUM),
]


def create_standard_error_response(
    error_type: ErrorType,
    message: str,
    user_friendly: str | None = None,
    details: dict[str, Any] | None = None,
    severity: ErrorSeverity = ErrorSeverity.MEDIUM,
) -> dict[str, Any]:
    """
    Create a standardized error response.

    Args:
        error_type: The type of error
        message: Technical error message
        user_friendly: User-friendly error message (optional)
        details: Additional error details (optional)
        severity: Error severity level (optional)

    Returns:
        Standardized error response dictionary
    """
    return {
        "error": {
            "type": error_type.value,
            "message": message,
            "user_friendly": user_friendly or message,
            "details": details or {},
            "severity": severity.value,
            "timestamp": datetime.now(UTC).isoformat(),
        }
    }


def classify_exception(exc: Exception) -> tuple[ErrorType, str, ErrorSeverity]:
    """Map an exception to its error type, user-facing message, and severity."""
    for exc_type, error_type, user_friendly, severity in _DOMAIN_ERROR_MAP:
        if isinstance(exc, exc_type):
            return error_type, user_friendly, severity

    # Application-layer errors declare their own classification.
    error_type = getattr(exc, "error_type", None)
    if isinstance(error_type, ErrorType):
        return error_type, getattr(exc, "user_friendly", str(exc)), ErrorSeverity.LOW

    return ErrorType.INTERNAL_ERROR, ErrorMessages.INTERNAL_ERROR, ErrorSeverity.HIGH


def error_response_from_exception(exc: Exception) -> dict[str, Any]:
    """Build a standardized error response for any raised exception."""
    error_type, user_friendly, severity = classify_exception(exc)
    details = dict(getattr(exc, "details", None) or {})
    message = exc.message if isinstance(exc, DomainError) else str(exc)
    if error_type is ErrorType.INTERNAL_ERROR:
        # do not leak internals of unexpected failures
        details = {"original_type": type(exc).__name__}
    return create_standard_error_response(error_type, message, user_friendly, details, severity)


__all__ = [
    "ErrorMessages",
    "ErrorSeverity",
    "ErrorType",
    "classify_exception",
    "create_standard_error_response",
    "error_response_from_exception",
]
