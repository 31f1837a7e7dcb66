import uuid

import pytest

from equipment.config import InventoryConfig
from equipment.domain.entities import Inventory, Store
from equipment.domain.exceptions import CapacityExceededError, ValidationError
from equipment.domain.value_objects import CharacterId, InventoryId, ItemId, ItemStatus, ItemType, Money, StoreId
from equipment.persistence import (
    ContainerRecord,
    InventoryReconstitutionFactory,
    StoreReconstitutionFactory,
)


def item_payload(slot_number: int, status: str = "in_backpack", **overrides) -> dict:
    payload = {
        "id": str(uuid.uuid4()),
        "name": f"Obsidian Helm {slot_number}",
        "description": "A helm carved from volcanic glass.",
        "image_file_path": "images/items/helm.png",
        "type": "armor",
        "price": 12,
        "prototype_id": str(uuid.uuid4()),
        "creator_character_id": None,
        "effects": [{"effect_type": "defense", "magnitude": 3}],
        "slot_number": slot_number,
        "status": status,
    }
    payload.update(overrides)
    return payload


def container_payload(items: list[dict], money: int = 5) -> dict:
    return {"id": str(uuid.uuid4()), "owner_id": str(uuid.uuid4()), "money": money, "items": items}


def test_reconstitutes_inventory_with_persisted_slots():
    payload = container_payload([item_payload(0), item_payload(3, status="equipped")])

    inventory = InventoryReconstitutionFactory().reconstitute(payload)

    assert isinstance(inventory, Inventory)
    assert inventory.id == InventoryId.from_string(payload["id"])
    assert inventory.owner_id == CharacterId.from_string(payload["owner_id"])
    assert inventory.get_money() == Money(5)
    assert sorted(inventory.get_items()) == [0, 3]
    helm = inventory.get_items()[3]
    assert helm.status is ItemStatus.EQUIPPED
    assert helm.item.type is ItemType.ARMOR
    assert helm.item.id == ItemId.from_string(payload["items"][1]["id"])
    assert helm.item.effects[0].magnitude == 3


def test_reconstitutes_store():
    store = StoreReconstitutionFactory().reconstitute(container_payload([item_payload(0, status="in_store")]))

    assert isinstance(store, Store)
    assert isinstance(store.id, StoreId)
    assert store.get_items()[0].status is ItemStatus.IN_STORE


def test_crafted_item_keeps_its_creator():
    creator = str(uuid.uuid4())
    payload = container_payload([item_payload(0, creator_character_id=creator)])

    inventory = InventoryReconstitutionFactory().reconstitute(payload)

    assert inventory.get_items()[0].item.creator_character_id == CharacterId.from_string(creator)


def test_duplicate_slot_numbers_are_rejected():
    with pytest.raises(ValidationError):
        InventoryReconstitutionFactory().reconstitute(container_payload([item_payload(1), item_payload(1)]))


def test_unknown_status_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        InventoryReconstitutionFactory().reconstitute(container_payload([item_payload(0, status="lost")]))

    assert exc_info.value.field == "status"


def test_unknown_item_type_is_rejected():
    with pytest.raises(ValidationError):
        InventoryReconstitutionFactory().reconstitute(container_payload([item_payload(0, type="relic")]))


def test_negative_money_is_rejected_as_domain_error():
    with pytest.raises(ValidationError) as exc_info:
        InventoryReconstitutionFactory().reconstitute(container_payload([], money=-1))

    assert exc_info.value.field == "money"


def test_malformed_identifier_is_rejected():
    payload = container_payload([])
    payload["owner_id"] = "nobody"

    with pytest.raises(ValidationError):
        InventoryReconstitutionFactory().reconstitute(payload)


def test_store_statuses_in_inventory_are_rejected():
    with pytest.raises(ValidationError):
        InventoryReconstitutionFactory().reconstitute(container_payload([item_payload(0, status="in_store")]))


def test_configured_capacity_is_enforced():
    factory = InventoryReconstitutionFactory.from_config(InventoryConfig(number_of_slots=2))

    with pytest.raises(CapacityExceededError):
        factory.reconstitute(container_payload([item_payload(slot) for slot in range(3)]))


def test_store_factory_uses_store_capacity():
    factory = StoreReconstitutionFactory.from_config(InventoryConfig(store_number_of_slots=4))

    store = factory.reconstitute(container_payload([]))

    assert store.number_of_slots == 4


def test_dehydrate_reproduces_the_record():
    factory = InventoryReconstitutionFactory()
    payload = container_payload([item_payload(0), item_payload(4, status="equipped")], money=17)
    record = ContainerRecord.model_validate(payload)

    dehydrated = factory.dehydrate(factory.reconstitute(record))

    assert dehydrated.model_dump() == record.model_dump()


def test_dehydrate_after_mutation(make_inventory, make_item):
    inventory = make_inventory(1, money=3)
    sword = make_item(price=40)
    inventory.add(sword)
    inventory.equip(sword.id)

    record = InventoryReconstitutionFactory().dehydrate(inventory)

    assert record.money == 3
    assert [entry.slot_number for entry in record.items] == [0, 1]
    assert record.items[1].status == "equipped"
    assert record.items[1].price == 40
    assert record.items[1].id == str(sword.id)
