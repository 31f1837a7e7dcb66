"""
Domain repository interfaces for the equipment subsystem.

Repositories let the application layer load and persist container
aggregates without the domain knowing how they are stored. Each load
returns a fresh aggregate; ``save`` fully replaces the stored state.

Implementations live in the persistence layer:
equipment/persistence/repositories/memory.py
"""

# pylint: disable=unnecessary-ellipsis  # Reason: Protocol method bodies use ... per typing.Protocol convention

from __future__ import annotations

from typing import Protocol

from ..entities import Inventory, Store
from ..value_objects import CharacterId, InventoryId, StoreId


class InventoryRepository(Protocol):
    """Contract for loading and saving inventories."""

    def get_inventory(self, inventory_id: InventoryId) -> Inventory | None:
        """Load an inventory by id."""
        ...

    def get_inventory_by_owner(self, owner_id: CharacterId) -> Inventory | None:
        """Load the inventory belonging to a character."""
        ...

    def save_inventory(self, inventory: Inventory) -> None:
        """Persist an inventory, replacing its stored state."""
        ...


class StoreRepository(Protocol):
    """Contract for loading and saving stores."""

    def get_store(self, store_id: StoreId) -> Store | None:
        """Load a store by id."""
        ...

    def get_store_by_owner(self, owner_id: CharacterId) -> Store | None:
        """Load the store belonging to a character."""
        ...

    def save_store(self, store: Store) -> None:
        """Persist a store, replacing its stored state."""
        ...


__all__ = ["InventoryRepository", "StoreRepository"]
