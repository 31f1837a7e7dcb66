"""Money value object: a non-negative integral currency amount."""

from __future__ import annotations

from dataclasses import dataclass

from ..exceptions import InsufficientFundsError, ValidationError


@dataclass(frozen=True, slots=True, order=True)
class Money:
    """
    Immutable, non-negative amount of currency.

    Arithmetic never mutates an operand; ``add`` and ``subtract`` return a new
    Money. Subtraction that would go below zero raises InsufficientFundsError.
    """

    amount: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise ValidationError("Money amount must be an integer", field="money", value=self.amount)
        if self.amount < 0:
            raise ValidationError("Money amount cannot be negative", field="money", value=self.amount)

    @classmethod
    def create(cls, amount: int) -> Money:
        return cls(amount)

    def add(self, other: Money) -> Money:
        _require_money(other)
        return Money(self.amount + other.amount)

    def subtract(self, other: Money) -> Money:
        _require_money(other)
        if self.amount - other.amount < 0:
            raise InsufficientFundsError(available=self.amount, requested=other.amount)
        return Money(self.amount - other.amount)

    def covers(self, other: Money) -> bool:
        return self.amount >= other.amount

    def value(self) -> int:
        return self.amount

    def __str__(self) -> str:
        return str(self.amount)


def _require_money(other: object) -> None:
    if not isinstance(other, Money):
        raise ValidationError("Money arithmetic requires a Money operand", field="money", value=type(other).__name__)


__all__ = ["Money"]
