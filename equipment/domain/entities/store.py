"""A character's store: items listed for sale plus the takings."""

from __future__ import annotations

from typing import ClassVar

from ..value_objects import ItemId, ItemStatus, Money, StoreId
from .container import Container


class Store(Container):
    """Container whose items are all listed for sale."""

    ID_TYPE: ClassVar[type[StoreId]] = StoreId
    ALLOWED_STATUSES: ClassVar[frozenset[ItemStatus]] = frozenset({ItemStatus.IN_STORE})
    DEFAULT_STATUS: ClassVar[ItemStatus] = ItemStatus.IN_STORE

    def change_item_price(self, item_id: ItemId, price: Money) -> None:
        inventory_item = self.find(item_id)
        self._replace(item_id, inventory_item.with_price(price))

    def price_of(self, item_id: ItemId) -> Money:
        return self.find(item_id).item.price


__all__ = ["Store"]
