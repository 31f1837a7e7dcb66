"""
Store management service: the application layer over inventories and stores.

Each operation resolves the containers it touches, locks them through the
mutation guard in a consistent order, reloads them, invokes the domain, and
saves every mutated aggregate. Domain errors propagate unchanged after being
logged once.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, TypeVar

from ..domain.entities import Inventory, Store
from ..domain.exceptions import DomainError
from ..domain.repositories import InventoryRepository, StoreRepository
from ..domain.services import buy_item, move_item, move_money
from ..domain.value_objects import CharacterId, InventoryId, InventoryItem, ItemId, ItemStatus, Money, StoreId
from ..error_types import ErrorMessages, ErrorType
from ..structured_logging.enhanced_logging_config import get_logger, log_exception_once
from .container_mutation_guard import ContainerMutationGuard

logger = get_logger(__name__)

T = TypeVar("T")


class StoreManagementError(Exception):
    """Base exception for store management operations."""

    error_type: ErrorType = ErrorType.INTERNAL_ERROR
    user_friendly: str = ErrorMessages.INTERNAL_ERROR

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ContainerNotFoundError(StoreManagementError):
    """Raised when a character has no inventory or store, or a store id is unknown."""

    error_type = ErrorType.RESOURCE_NOT_FOUND
    user_friendly = ErrorMessages.CONTAINER_NOT_FOUND


class DuplicateMutationError(StoreManagementError):
    """Raised when a mutation token has already been applied."""

    error_type = ErrorType.DUPLICATE_REQUEST
    user_friendly = ErrorMessages.DUPLICATE_REQUEST


class ForbiddenTradeError(StoreManagementError):
    """Raised when a character tries to buy from their own store."""

    error_type = ErrorType.FORBIDDEN
    user_friendly = ErrorMessages.CANNOT_BUY_OWN_ITEM


@dataclass
class StoreManagementService:
    """
    Orchestrates equip, store management, and trade flows for characters.

    Aggregates are loaded fresh inside the guarded section of every
    operation, so concurrent requests against the same containers are
    serialized and never work on stale state.
    """

    inventories: InventoryRepository
    stores: StoreRepository
    mutation_guard: ContainerMutationGuard = field(default_factory=ContainerMutationGuard)

    # Equipment

    def equip_item(self, character_id: CharacterId, item_id: ItemId, *, token: str | None = None) -> InventoryItem:
        inventory_id = self._inventory_of(character_id).id

        def apply() -> InventoryItem:
            inventory = self._load_inventory(inventory_id)
            inventory.equip(item_id)
            self.inventories.save_inventory(inventory)
            return inventory.find(item_id)

        result = self._mutate("equip_item", [inventory_id], token, apply, item_id=str(item_id))
        logger.info("Item equipped", character_id=str(character_id), item_id=str(item_id))
        return result

    def unequip_item(self, character_id: CharacterId, item_id: ItemId, *, token: str | None = None) -> InventoryItem:
        inventory_id = self._inventory_of(character_id).id

        def apply() -> InventoryItem:
            inventory = self._load_inventory(inventory_id)
            inventory.unequip(item_id)
            self.inventories.save_inventory(inventory)
            return inventory.find(item_id)

        result = self._mutate("unequip_item", [inventory_id], token, apply, item_id=str(item_id))
        logger.info("Item un-equipped", character_id=str(character_id), item_id=str(item_id))
        return result

    # Managing one's own store

    def move_item_to_store(self, character_id: CharacterId, item_id: ItemId, *, token: str | None = None) -> int:
        """Move an item from the character's inventory into their store; returns the store slot."""
        inventory_id, store_id = self._own_containers(character_id)

        def apply() -> int:
            inventory, store = self._load_inventory(inventory_id), self._load_store(store_id)
            slot_number = move_item(inventory, store, item_id, ItemStatus.IN_STORE)
            self._save(inventory, store)
            return slot_number

        slot_number = self._mutate("move_item_to_store", [inventory_id, store_id], token, apply, item_id=str(item_id))
        logger.info("Item moved to store", character_id=str(character_id), item_id=str(item_id), slot=slot_number)
        return slot_number

    def move_item_to_inventory(self, character_id: CharacterId, item_id: ItemId, *, token: str | None = None) -> int:
        """Move an item from the character's store back into their inventory; returns the inventory slot."""
        inventory_id, store_id = self._own_containers(character_id)

        def apply() -> int:
            inventory, store = self._load_inventory(inventory_id), self._load_store(store_id)
            slot_number = move_item(store, inventory, item_id, ItemStatus.IN_BACKPACK)
            self._save(inventory, store)
            return slot_number

        slot_number = self._mutate(
            "move_item_to_inventory", [inventory_id, store_id], token, apply, item_id=str(item_id)
        )
        logger.info(
            "Item moved to inventory", character_id=str(character_id), item_id=str(item_id), slot=slot_number
        )
        return slot_number

    def move_money_to_store(self, character_id: CharacterId, amount: Money, *, token: str | None = None) -> None:
        inventory_id, store_id = self._own_containers(character_id)

        def apply() -> None:
            inventory, store = self._load_inventory(inventory_id), self._load_store(store_id)
            move_money(inventory, store, amount)
            self._save(inventory, store)

        self._mutate("move_money_to_store", [inventory_id, store_id], token, apply, amount=amount.value())
        logger.info("Money moved to store", character_id=str(character_id), amount=amount.value())

    def move_money_to_inventory(self, character_id: CharacterId, amount: Money, *, token: str | None = None) -> None:
        inventory_id, store_id = self._own_containers(character_id)

        def apply() -> None:
            inventory, store = self._load_inventory(inventory_id), self._load_store(store_id)
            move_money(store, inventory, amount)
            self._save(inventory, store)

        self._mutate("move_money_to_inventory", [inventory_id, store_id], token, apply, amount=amount.value())
        logger.info("Money moved to inventory", character_id=str(character_id), amount=amount.value())

    def change_item_price(
        self, character_id: CharacterId, item_id: ItemId, price: Money, *, token: str | None = None
    ) -> InventoryItem:
        store_id = self._store_of(character_id).id

        def apply() -> InventoryItem:
            store = self._load_store(store_id)
            store.change_item_price(item_id, price)
            self.stores.save_store(store)
            return store.find(item_id)

        result = self._mutate("change_item_price", [store_id], token, apply, item_id=str(item_id))
        logger.info("Store item repriced", character_id=str(character_id), item_id=str(item_id), price=price.value())
        return result

    # Trade

    def buy_item(
        self, buyer_id: CharacterId, store_id: StoreId, item_id: ItemId, *, token: str | None = None
    ) -> InventoryItem:
        """Buy an item listed in another character's store at its listed price."""
        inventory_id = self._inventory_of(buyer_id).id
        seller_store = self._load_store(store_id)
        if seller_store.owner_id == buyer_id:
            raise ForbiddenTradeError(
                "Characters cannot buy from their own store",
                details={"character_id": str(buyer_id), "store_id": str(store_id)},
            )

        def apply() -> InventoryItem:
            inventory, store = self._load_inventory(inventory_id), self._load_store(store_id)
            bought = buy_item(inventory, store, item_id)
            self._save(inventory, store)
            return bought

        bought = self._mutate("buy_item", [inventory_id, store_id], token, apply, item_id=str(item_id))
        logger.info(
            "Item bought",
            buyer_id=str(buyer_id),
            seller_id=str(seller_store.owner_id),
            item_id=str(item_id),
            price=bought.item.price.value(),
        )
        return bought

    # Internals

    def _mutate(
        self,
        operation: str,
        container_ids: list[InventoryId | StoreId],
        token: str | None,
        apply: Callable[[], T],
        **log_context: Any,
    ) -> T:
        with self._guarded(operation, container_ids, token):
            try:
                return apply()
            except DomainError as exc:
                log_exception_once(
                    logger,
                    "warning",
                    "Container mutation rejected",
                    exc=exc,
                    operation=operation,
                    container_ids=[str(container_id) for container_id in container_ids],
                    **log_context,
                )
                raise

    @contextmanager
    def _guarded(
        self, operation: str, container_ids: list[InventoryId | StoreId], token: str | None
    ) -> Iterator[None]:
        with self.mutation_guard.acquire(container_ids, token) as decision:
            if decision.duplicate:
                raise DuplicateMutationError(
                    f"Mutation token already applied for {operation}",
                    details={"operation": operation, "mutation_token": token},
                )
            yield

    def _own_containers(self, character_id: CharacterId) -> tuple[InventoryId, StoreId]:
        return self._inventory_of(character_id).id, self._store_of(character_id).id

    def _inventory_of(self, character_id: CharacterId) -> Inventory:
        inventory = self.inventories.get_inventory_by_owner(character_id)
        if inventory is None:
            raise ContainerNotFoundError(
                f"No inventory for character {character_id}", details={"character_id": str(character_id)}
            )
        return inventory

    def _store_of(self, character_id: CharacterId) -> Store:
        store = self.stores.get_store_by_owner(character_id)
        if store is None:
            raise ContainerNotFoundError(
                f"No store for character {character_id}", details={"character_id": str(character_id)}
            )
        return store

    def _load_inventory(self, inventory_id: InventoryId) -> Inventory:
        inventory = self.inventories.get_inventory(inventory_id)
        if inventory is None:
            raise ContainerNotFoundError(
                f"Inventory {inventory_id} not found", details={"inventory_id": str(inventory_id)}
            )
        return inventory

    def _load_store(self, store_id: StoreId) -> Store:
        store = self.stores.get_store(store_id)
        if store is None:
            raise ContainerNotFoundError(f"Store {store_id} not found", details={"store_id": str(store_id)})
        return store

    def _save(self, inventory: Inventory, store: Store) -> None:
        self.inventories.save_inventory(inventory)
        self.stores.save_store(store)


__all__ = [
    "ContainerNotFoundError",
    "DuplicateMutationError",
    "ForbiddenTradeError",
    "StoreManagementError",
    "StoreManagementService",
]
