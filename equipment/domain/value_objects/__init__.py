"""
Domain value objects for the equipment subsystem.

Value objects are immutable objects defined by their attributes, not identity:
identifiers, Money, ItemStatus, Item and InventoryItem. Every change produces
a new object.

Example:
    from equipment.domain.value_objects import Money

    wallet = Money(5).add(Money(4))
    assert wallet == Money(9)
"""

from .identifiers import CharacterId, Identifier, InventoryId, ItemId, ItemPrototypeId, StoreId
from .inventory_item import InventoryItem
from .item import EQUIPPABLE_ITEM_TYPES, Item, ItemEffect, ItemType
from .item_status import ItemStatus
from .money import Money

__all__ = [
    "CharacterId",
    "EQUIPPABLE_ITEM_TYPES",
    "Identifier",
    "InventoryId",
    "InventoryItem",
    "Item",
    "ItemEffect",
    "ItemId",
    "ItemPrototypeId",
    "ItemStatus",
    "ItemType",
    "Money",
    "StoreId",
]
