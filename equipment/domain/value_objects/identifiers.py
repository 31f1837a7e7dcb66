"""Opaque identity values for containers, characters, and items."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Self

from ..exceptions import ValidationError


@dataclass(frozen=True, slots=True)
class Identifier:
    """
    Validated, immutable identity wrapping a canonical UUID string.

    Two identifiers are equal only when they share both the concrete type and
    the value, so an InventoryId never compares equal to a StoreId.
    Construct through ``from_string`` or ``generate``.
    """

    value: str

    @classmethod
    def from_string(cls, raw: str) -> Self:
        if not isinstance(raw, str):
            raise ValidationError(
                f"{cls.__name__} must be built from a string", field=cls.__name__, value=type(raw).__name__
            )
        try:
            parsed = uuid.UUID(raw.strip())
        except ValueError:
            raise ValidationError(f"'{raw}' is not a valid {cls.__name__}", field=cls.__name__, value=raw) from None
        return cls(str(parsed))

    @classmethod
    def generate(cls) -> Self:
        return cls(str(uuid.uuid4()))

    def __str__(self) -> str:
        return self.value


class InventoryId(Identifier):
    """Identity of a character's inventory."""

    __slots__ = ()


class StoreId(Identifier):
    """Identity of a character's store."""

    __slots__ = ()


class CharacterId(Identifier):
    """Identity of the character owning a container or crafting an item."""

    __slots__ = ()


class ItemId(Identifier):
    """Identity of a single item."""

    __slots__ = ()


class ItemPrototypeId(Identifier):
    """Identity of the template an item was minted from."""

    __slots__ = ()


__all__ = ["Identifier", "InventoryId", "StoreId", "CharacterId", "ItemId", "ItemPrototypeId"]
