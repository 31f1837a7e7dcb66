"""
Capacity-bounded container aggregate shared by inventories and stores.

A container holds a slot-indexed mapping of InventoryItems plus a Money
balance, and owns every mutation rule for its contents. Inventory and Store
differ only in the statuses they permit.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import ClassVar

from ..exceptions import CapacityExceededError, ItemTypeMismatchError, NotFoundError, ValidationError
from ..value_objects import CharacterId, Identifier, InventoryItem, Item, ItemId, ItemStatus, Money

NUMBER_OF_SLOTS = 20


class Container:
    """
    Base container aggregate.

    Slot numbers are assigned by appending: a new item lands in the slot equal
    to the current item count. Removing an item leaves a gap; slots are never
    renumbered.
    """

    NUMBER_OF_SLOTS: ClassVar[int] = NUMBER_OF_SLOTS
    ID_TYPE: ClassVar[type[Identifier]] = Identifier
    ALLOWED_STATUSES: ClassVar[frozenset[ItemStatus]] = frozenset(ItemStatus)
    DEFAULT_STATUS: ClassVar[ItemStatus] = ItemStatus.IN_BACKPACK

    def __init__(
        self,
        container_id: Identifier,
        owner_id: CharacterId,
        items: Mapping[int, InventoryItem] | None,
        money: Money,
        *,
        number_of_slots: int | None = None,
    ):
        if not isinstance(container_id, self.ID_TYPE):
            raise ValidationError(
                f"{type(self).__name__} id must be a {self.ID_TYPE.__name__}",
                field="id",
                value=type(container_id).__name__,
            )
        if not isinstance(owner_id, CharacterId):
            raise ValidationError("Owner id must be a CharacterId", field="owner_id", value=type(owner_id).__name__)
        if not isinstance(money, Money):
            raise ValidationError("Money must be a Money value", field="money", value=type(money).__name__)

        limit = self.NUMBER_OF_SLOTS if number_of_slots is None else number_of_slots
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ValidationError("Number of slots must be a positive integer", field="number_of_slots", value=limit)

        if items is not None and not isinstance(items, Mapping):
            raise ValidationError(
                "Items must be a mapping of slot number to InventoryItem", field="items", value=type(items).__name__
            )
        contents = dict(items or {})
        self._validate_contents(contents)
        if len(contents) > limit:
            raise CapacityExceededError(attempted=len(contents), limit=limit)

        self._id = container_id
        self._owner_id = owner_id
        self._items: dict[int, InventoryItem] = contents
        self._money = money
        self._number_of_slots = limit

    def _validate_contents(self, contents: dict[int, InventoryItem]) -> None:
        seen: set[ItemId] = set()
        for slot_number, inventory_item in contents.items():
            if not isinstance(inventory_item, InventoryItem):
                raise ItemTypeMismatchError(slot_number, type(inventory_item).__name__)
            if isinstance(slot_number, bool) or not isinstance(slot_number, int) or slot_number < 0:
                raise ValidationError("Slot numbers must be non-negative integers", field="slot", value=slot_number)
            self.ensure_status_allowed(inventory_item.status)
            if inventory_item.item_id in seen:
                raise ValidationError("Item appears in more than one slot", field="items", value=inventory_item.item_id)
            seen.add(inventory_item.item_id)

    def ensure_status_allowed(self, status: ItemStatus) -> None:
        if status not in self.ALLOWED_STATUSES:
            raise ValidationError(
                f"{type(self).__name__} cannot hold items with status '{status.value}'",
                field="status",
                value=status.value,
            )

    @property
    def id(self) -> Identifier:
        return self._id

    @property
    def owner_id(self) -> CharacterId:
        return self._owner_id

    @property
    def number_of_slots(self) -> int:
        return self._number_of_slots

    @property
    def money(self) -> Money:
        return self._money

    def get_money(self) -> Money:
        return self._money

    def get_items(self) -> Mapping[int, InventoryItem]:
        """Read-only snapshot of the slots; later mutations do not show through."""
        return MappingProxyType(dict(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[InventoryItem]:
        return iter(list(self._items.values()))

    def free_slots(self) -> int:
        return self._number_of_slots - len(self._items)

    def has_free_slot(self) -> bool:
        return self.free_slots() > 0

    def is_full(self) -> bool:
        return not self.has_free_slot()

    def ensure_free_slot(self) -> None:
        if self.is_full():
            raise CapacityExceededError(attempted=len(self._items) + 1, limit=self._number_of_slots)

    def contains(self, item_id: ItemId) -> bool:
        return self._slot_of(item_id) is not None

    def find(self, item_id: ItemId) -> InventoryItem:
        return self._items[self.slot_of(item_id)]

    def slot_of(self, item_id: ItemId) -> int:
        slot_number = self._slot_of(item_id)
        if slot_number is None:
            raise NotFoundError("Item", str(item_id))
        return slot_number

    def _slot_of(self, item_id: ItemId) -> int | None:
        for slot_number, inventory_item in self._items.items():
            if inventory_item.item_id == item_id:
                return slot_number
        return None

    def add(self, item: Item) -> int:
        """Wrap a brand-new item with the default status and append it; returns its slot."""
        if not isinstance(item, Item):
            raise ValidationError("Only Items can be added", field="item", value=type(item).__name__)
        return self.put(InventoryItem(item, self.DEFAULT_STATUS))

    def put(self, inventory_item: InventoryItem) -> int:
        """Append an already-wrapped item arriving from another container."""
        if not isinstance(inventory_item, InventoryItem):
            raise ItemTypeMismatchError(self._next_slot_number(), type(inventory_item).__name__)
        self.ensure_status_allowed(inventory_item.status)
        if self.contains(inventory_item.item_id):
            raise ValidationError(
                "Item is already in this container", field="item", value=inventory_item.item_id
            )
        self.ensure_free_slot()

        slot_number = self._next_slot_number()
        self._items[slot_number] = inventory_item
        return slot_number

    def _next_slot_number(self) -> int:
        candidate = len(self._items)
        if candidate in self._items:
            # a gap left by a removal sits below the count; keep appending past the highest slot
            candidate = max(self._items) + 1
        return candidate

    def remove(self, item_id: ItemId) -> InventoryItem:
        slot_number = self.slot_of(item_id)
        return self._items.pop(slot_number)

    def _replace(self, item_id: ItemId, inventory_item: InventoryItem) -> None:
        self._items[self.slot_of(item_id)] = inventory_item

    def put_money_in(self, amount: Money) -> None:
        self._money = self._money.add(amount)

    def take_money_out(self, amount: Money) -> None:
        self._money = self._money.subtract(amount)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self._id}, owner_id={self._owner_id}, "
            f"items={len(self._items)}/{self._number_of_slots}, money={self._money})"
        )


__all__ = ["Container", "NUMBER_OF_SLOTS"]
