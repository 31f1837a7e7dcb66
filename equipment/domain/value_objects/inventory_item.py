"""The unit actually stored in a container slot: an item plus its status."""

from __future__ import annotations

from dataclasses import dataclass

from ..exceptions import StateTransitionError, ValidationError
from .identifiers import ItemId
from .item import Item
from .item_status import ItemStatus
from .money import Money


@dataclass(frozen=True, slots=True)
class InventoryItem:
    """
    An Item paired with its current ItemStatus.

    Equality is structural. Status changes never mutate: ``with_status``
    returns a new InventoryItem and rejects transitions the status state
    machine does not allow.
    """

    item: Item
    status: ItemStatus

    def __post_init__(self) -> None:
        if not isinstance(self.item, Item):
            raise ValidationError("InventoryItem requires an Item", field="item", value=type(self.item).__name__)
        if not isinstance(self.status, ItemStatus):
            raise ValidationError(
                "InventoryItem requires an ItemStatus", field="status", value=type(self.status).__name__
            )

    @classmethod
    def create(cls, item: Item, status: ItemStatus) -> InventoryItem:
        return cls(item, status)

    @property
    def item_id(self) -> ItemId:
        return self.item.id

    def get_item(self) -> Item:
        return self.item

    def get_status(self) -> ItemStatus:
        return self.status

    def with_status(self, new_status: ItemStatus) -> InventoryItem:
        if not isinstance(new_status, ItemStatus):
            raise ValidationError("Status must be an ItemStatus", field="status", value=type(new_status).__name__)
        if not self.status.can_transition_to(new_status):
            raise StateTransitionError(str(self.item.id), self.status.value, new_status.value)
        return InventoryItem(self.item, new_status)

    def with_price(self, price: Money) -> InventoryItem:
        return InventoryItem(self.item.with_price(price), self.status)


__all__ = ["InventoryItem"]
