"""
In-memory container repository.

Stores dehydrated records, never live aggregates: every load reconstitutes
a fresh Inventory or Store, and every save fully replaces the stored record.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from typing import Any

from ...domain.entities import Inventory, Store
from ...domain.value_objects import CharacterId, InventoryId, StoreId
from ...structured_logging.enhanced_logging_config import get_logger
from ..reconstitution import InventoryReconstitutionFactory, StoreReconstitutionFactory, parse_container_record
from ..records import ContainerRecord

logger = get_logger(__name__)


class InMemoryContainerRepository:
    """Implements InventoryRepository and StoreRepository over dictionaries of records."""

    def __init__(
        self,
        inventory_factory: InventoryReconstitutionFactory | None = None,
        store_factory: StoreReconstitutionFactory | None = None,
    ):
        self._inventory_factory = inventory_factory or InventoryReconstitutionFactory()
        self._store_factory = store_factory or StoreReconstitutionFactory()
        self._inventories: dict[str, ContainerRecord] = {}
        self._stores: dict[str, ContainerRecord] = {}
        self._lock = threading.Lock()

    def add_inventory_record(self, payload: ContainerRecord | Mapping[str, Any]) -> None:
        # round-trip through the aggregate so bad data is rejected and ids are stored canonically
        inventory = self._inventory_factory.reconstitute(parse_container_record(payload))
        record = self._inventory_factory.dehydrate(inventory)
        with self._lock:
            self._inventories[record.id] = record

    def add_store_record(self, payload: ContainerRecord | Mapping[str, Any]) -> None:
        store = self._store_factory.reconstitute(parse_container_record(payload))
        record = self._store_factory.dehydrate(store)
        with self._lock:
            self._stores[record.id] = record

    def get_inventory(self, inventory_id: InventoryId) -> Inventory | None:
        with self._lock:
            record = self._inventories.get(str(inventory_id))
        if record is None:
            return None
        return self._inventory_factory.reconstitute(record)

    def get_inventory_by_owner(self, owner_id: CharacterId) -> Inventory | None:
        with self._lock:
            record = next((r for r in self._inventories.values() if r.owner_id == str(owner_id)), None)
        if record is None:
            return None
        return self._inventory_factory.reconstitute(record)

    def save_inventory(self, inventory: Inventory) -> None:
        record = self._inventory_factory.dehydrate(inventory)
        with self._lock:
            self._inventories[record.id] = record
        logger.debug("Inventory saved", inventory_id=record.id, items=len(record.items), money=record.money)

    def get_store(self, store_id: StoreId) -> Store | None:
        with self._lock:
            record = self._stores.get(str(store_id))
        if record is None:
            return None
        return self._store_factory.reconstitute(record)

    def get_store_by_owner(self, owner_id: CharacterId) -> Store | None:
        with self._lock:
            record = next((r for r in self._stores.values() if r.owner_id == str(owner_id)), None)
        if record is None:
            return None
        return self._store_factory.reconstitute(record)

    def save_store(self, store: Store) -> None:
        record = self._store_factory.dehydrate(store)
        with self._lock:
            self._stores[record.id] = record
        logger.debug("Store saved", store_id=record.id, items=len(record.items), money=record.money)

    def inventory_record(self, inventory_id: InventoryId) -> ContainerRecord | None:
        with self._lock:
            record = self._inventories.get(str(inventory_id))
        return record.model_copy(deep=True) if record is not None else None

    def store_record(self, store_id: StoreId) -> ContainerRecord | None:
        with self._lock:
            record = self._stores.get(str(store_id))
        return record.model_copy(deep=True) if record is not None else None


__all__ = ["InMemoryContainerRepository"]
