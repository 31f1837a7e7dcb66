"""
Domain-specific exceptions for the equipment subsystem.

These exceptions represent business rule violations and domain errors,
not infrastructure or technical failures. They are raised synchronously at
the point of violation and propagate unchanged to the caller; the domain
never clamps or auto-corrects an invalid state.

Example:
    from equipment.domain.exceptions import InsufficientFundsError

    try:
        inventory.take_money_out(Money(500))
    except InsufficientFundsError as exc:
        logger.warning("Purchase rejected", **exc.details)
"""

from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert the error to a dictionary for logging and API responses."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(DomainError):
    """Raised when a value fails validation at construction time."""

    def __init__(self, message: str, field: str | None = None, value: Any | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value
        if field:
            self.details["field"] = field
        if value is not None:
            self.details["value"] = str(value)


class ItemTypeMismatchError(ValidationError):
    """Raised when something other than an InventoryItem is placed into a container slot."""

    def __init__(self, slot_number: Any, actual_type: str):
        super().__init__(
            f"Slot {slot_number} must hold an InventoryItem, got {actual_type}",
            field="items",
            value=actual_type,
        )
        self.slot_number = slot_number
        self.details["slot_number"] = slot_number


class CapacityExceededError(DomainError):
    """Raised when a container would hold more items than it has slots."""

    def __init__(self, attempted: int, limit: int):
        super().__init__(
            f"Container cannot hold {attempted} items; it only has {limit} slots",
            details={"attempted": attempted, "limit": limit},
        )
        self.attempted = attempted
        self.limit = limit


class NotFoundError(DomainError):
    """Raised when an operation references an item that is not in the container."""

    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            details={"resource_type": resource_type, "resource_id": resource_id},
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class StateTransitionError(DomainError):
    """Raised when an item status change is not allowed from its current status."""

    def __init__(self, item_id: str, current: str, requested: str, reason: str | None = None):
        message = f"Item '{item_id}' cannot go from '{current}' to '{requested}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            message,
            details={"item_id": item_id, "current_status": current, "requested_status": requested},
        )
        self.item_id = item_id
        self.current = current
        self.requested = requested


class InsufficientFundsError(ValidationError):
    """Raised when a money subtraction would leave a negative balance."""

    def __init__(self, available: int, requested: int):
        super().__init__(f"Insufficient funds: {requested} requested, {available} available", field="money")
        self.available = available
        self.requested = requested
        self.details["available"] = available
        self.details["requested"] = requested


__all__ = [
    "DomainError",
    "ValidationError",
    "ItemTypeMismatchError",
    "CapacityExceededError",
    "NotFoundError",
    "StateTransitionError",
    "InsufficientFundsError",
]
