"""Item value objects.

An item is pure descriptive data. Every change of location or state happens
on the InventoryItem wrapping it; the only derived copy an item offers is a
re-priced one for store listings.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from ..exceptions import ValidationError
from .identifiers import CharacterId, ItemId, ItemPrototypeId
from .money import Money


class ItemType(str, Enum):
    """Item category."""

    WEAPON = "weapon"
    ARMOR = "armor"
    ACCESSORY = "accessory"
    CONSUMABLE = "consumable"
    MATERIAL = "material"
    MISCELLANEOUS = "miscellaneous"

    def is_equippable(self) -> bool:
        return self in EQUIPPABLE_ITEM_TYPES


EQUIPPABLE_ITEM_TYPES: frozenset[ItemType] = frozenset({ItemType.WEAPON, ItemType.ARMOR, ItemType.ACCESSORY})


@dataclass(frozen=True, slots=True)
class ItemEffect:
    """A single gameplay effect granted by an item, e.g. ``strength +2``."""

    effect_type: str
    magnitude: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.effect_type, str) or not self.effect_type.strip():
            raise ValidationError("Item effect type must be a non-empty string", field="effects")
        if isinstance(self.magnitude, bool) or not isinstance(self.magnitude, int):
            raise ValidationError("Item effect magnitude must be an integer", field="effects", value=self.magnitude)


@dataclass(frozen=True, slots=True)
class Item:  # pylint: disable=too-many-instance-attributes  # Reason: Item carries its full descriptive record
    """Immutable description of an item."""

    id: ItemId
    name: str
    description: str
    image_file_path: str
    type: ItemType
    price: Money
    prototype_id: ItemPrototypeId
    effects: tuple[ItemEffect, ...] = field(default_factory=tuple)
    creator_character_id: CharacterId | None = None

    def __post_init__(self) -> None:
        _require_instance("id", self.id, ItemId)
        _require_instance("prototype_id", self.prototype_id, ItemPrototypeId)
        _require_instance("price", self.price, Money)
        _require_instance("type", self.type, ItemType)
        for name in ("name", "description", "image_file_path"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValidationError(f"Item {name} must be a string", field=name, value=value)
        if not self.name.strip():
            raise ValidationError("Item name is required", field="name")
        if self.creator_character_id is not None:
            _require_instance("creator_character_id", self.creator_character_id, CharacterId)

        effects = tuple(self.effects)
        for effect in effects:
            _require_instance("effects", effect, ItemEffect)
        # frozen dataclass: normalise list input to a tuple
        object.__setattr__(self, "effects", effects)

    def with_price(self, price: Money) -> Item:
        _require_instance("price", price, Money)
        return replace(self, price=price)

    def is_equippable(self) -> bool:
        return self.type.is_equippable()

    def is_crafted(self) -> bool:
        return self.creator_character_id is not None


def _require_instance(name: str, value: object, expected: type) -> None:
    if not isinstance(value, expected):
        raise ValidationError(
            f"Item {name} must be a {expected.__name__}", field=name, value=type(value).__name__
        )


__all__ = ["Item", "ItemEffect", "ItemType", "EQUIPPABLE_ITEM_TYPES"]
