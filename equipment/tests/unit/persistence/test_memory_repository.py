import uuid

import pytest

from equipment.domain.exceptions import ValidationError
from equipment.domain.value_objects import CharacterId, InventoryId, ItemStatus, StoreId
from equipment.persistence.repositories import InMemoryContainerRepository


def record(status: str, *, items: int = 1, owner_id: str | None = None, money: int = 0) -> dict:
    return {
        "id": str(uuid.uuid4()),
        "owner_id": owner_id or str(uuid.uuid4()),
        "money": money,
        "items": [
            {
                "id": str(uuid.uuid4()),
                "name": f"Silver Dagger {slot}",
                "type": "weapon",
                "price": 5,
                "prototype_id": str(uuid.uuid4()),
                "slot_number": slot,
                "status": status,
            }
            for slot in range(items)
        ],
    }


def test_each_load_returns_a_fresh_aggregate():
    repository = InMemoryContainerRepository()
    payload = record("in_backpack")
    repository.add_inventory_record(payload)
    inventory_id = InventoryId.from_string(payload["id"])

    first = repository.get_inventory(inventory_id)
    first.equip(first.get_items()[0].item_id)

    second = repository.get_inventory(inventory_id)
    assert second is not first
    assert second.get_items()[0].status is ItemStatus.IN_BACKPACK


def test_save_replaces_stored_state():
    repository = InMemoryContainerRepository()
    payload = record("in_backpack", items=2)
    repository.add_inventory_record(payload)
    inventory = repository.get_inventory(InventoryId.from_string(payload["id"]))

    inventory.remove(inventory.get_items()[0].item_id)
    repository.save_inventory(inventory)

    stored = repository.inventory_record(inventory.id)
    assert [entry.slot_number for entry in stored.items] == [1]


def test_lookup_by_owner():
    repository = InMemoryContainerRepository()
    owner = str(uuid.uuid4())
    repository.add_inventory_record(record("in_backpack", owner_id=owner))
    repository.add_store_record(record("in_store", owner_id=owner, money=9))

    character_id = CharacterId.from_string(owner)

    assert repository.get_inventory_by_owner(character_id).owner_id == character_id
    assert repository.get_store_by_owner(character_id).get_money().value() == 9
    assert repository.get_store_by_owner(CharacterId.generate()) is None


def test_missing_containers_return_none():
    repository = InMemoryContainerRepository()

    assert repository.get_inventory(InventoryId.generate()) is None
    assert repository.get_store(StoreId.generate()) is None


def test_bad_records_are_rejected_on_the_way_in():
    repository = InMemoryContainerRepository()

    with pytest.raises(ValidationError):
        repository.add_store_record(record("in_backpack"))


def test_uppercase_ids_are_stored_canonically():
    repository = InMemoryContainerRepository()
    owner = str(uuid.uuid4()).upper()
    payload = record("in_backpack", owner_id=owner)
    payload["id"] = payload["id"].upper()
    repository.add_inventory_record(payload)
    inventory_id = InventoryId.from_string(payload["id"])

    inventory = repository.get_inventory(inventory_id)
    assert inventory is not None
    assert repository.get_inventory_by_owner(CharacterId.from_string(owner)).id == inventory_id

    repository.save_inventory(inventory)
    assert repository.inventory_record(inventory_id).id == payload["id"].lower()
    assert repository.inventory_record(inventory_id).owner_id == owner.lower()
