"""A character's inventory: backpack plus equipped items."""

from __future__ import annotations

from typing import ClassVar

from ..value_objects import InventoryId, InventoryItem, ItemId, ItemStatus
from .container import Container


class Inventory(Container):
    """Container whose items are either in the backpack or equipped."""

    ID_TYPE: ClassVar[type[InventoryId]] = InventoryId
    ALLOWED_STATUSES: ClassVar[frozenset[ItemStatus]] = frozenset({ItemStatus.IN_BACKPACK, ItemStatus.EQUIPPED})
    DEFAULT_STATUS: ClassVar[ItemStatus] = ItemStatus.IN_BACKPACK

    def equip(self, item_id: ItemId) -> None:
        """
        Equip an item currently in the backpack.

        Raises:
            NotFoundError: If the item is not in this inventory.
            StateTransitionError: If the item is not in the backpack.
        """
        inventory_item = self.find(item_id)
        self._replace(item_id, inventory_item.with_status(ItemStatus.EQUIPPED))

    def unequip(self, item_id: ItemId) -> None:
        """Return an equipped item to the backpack."""
        inventory_item = self.find(item_id)
        self._replace(item_id, inventory_item.with_status(ItemStatus.IN_BACKPACK))

    def equipped_items(self) -> list[InventoryItem]:
        return [inventory_item for inventory_item in self if inventory_item.status.is_equipped()]


__all__ = ["Inventory"]
