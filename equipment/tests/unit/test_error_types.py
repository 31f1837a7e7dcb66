"""
Unit tests for error classification and standardized error responses.
"""

import pytest

from equipment.domain.exceptions import (
    CapacityExceededError,
    InsufficientFundsError,
    NotFoundError,
    ValidationError,
)
from equipment.domain.value_objects import ItemId
from equipment.error_types import (
    ErrorMessages,
    ErrorSeverity,
    ErrorType,
    classify_exception,
    create_standard_error_response,
    error_response_from_exception,
)
from equipment.services import DuplicateMutationError, ForbiddenTradeError


def test_create_standard_error_response_defaults():
    response = create_standard_error_response(ErrorType.VALIDATION_ERROR, "bad price")

    error = response["error"]
    assert error["type"] == "validation_error"
    assert error["user_friendly"] == "bad price"
    assert error["details"] == {}
    assert error["severity"] == "medium"
    assert "timestamp" in error


@pytest.mark.parametrize(
    ("exc", "expected"),
    [
        (InsufficientFundsError(available=1, requested=5), ErrorType.INSUFFICIENT_FUNDS),
        (CapacityExceededError(attempted=21, limit=20), ErrorType.CAPACITY_EXCEEDED),
        (NotFoundError("Item", str(ItemId.generate())), ErrorType.RESOURCE_NOT_FOUND),
        (ValidationError("bad", field="price"), ErrorType.VALIDATION_ERROR),
        (DuplicateMutationError("again"), ErrorType.DUPLICATE_REQUEST),
        (ForbiddenTradeError("own store"), ErrorType.FORBIDDEN),
        (RuntimeError("boom"), ErrorType.INTERNAL_ERROR),
    ],
)
def test_classify_exception(exc, expected):
    error_type, _, _ = classify_exception(exc)
    assert error_type is expected


def test_insufficient_funds_is_not_reported_as_plain_validation():
    """InsufficientFundsError subclasses ValidationError but keeps its own category."""
    response = error_response_from_exception(InsufficientFundsError(available=1, requested=5))

    assert response["error"]["type"] == "insufficient_funds"
    assert response["error"]["user_friendly"] == ErrorMessages.NOT_ENOUGH_MONEY
    assert response["error"]["details"]["field"] == "money"


def test_internal_errors_hide_details():
    exc = KeyError("secret-column")
    exc.details = {"query": "SELECT"}  # type: ignore[attr-defined]

    response = error_response_from_exception(exc)

    assert response["error"]["details"] == {"original_type": "KeyError"}
    assert response["error"]["severity"] == ErrorSeverity.HIGH.value
    assert response["error"]["user_friendly"] == ErrorMessages.INTERNAL_ERROR
