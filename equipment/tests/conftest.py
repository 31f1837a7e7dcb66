"""
Test configuration and fixtures for the equipment test suite.

Provides builders for items, inventories, and stores so each test states
only the details it cares about.
"""

import os
from collections.abc import Callable

import pytest

os.environ.setdefault("LOGGING_ENVIRONMENT", "unit_test")

from equipment.domain.entities import Inventory, Store  # noqa: E402
from equipment.domain.value_objects import (  # noqa: E402
    CharacterId,
    InventoryId,
    InventoryItem,
    Item,
    ItemEffect,
    ItemId,
    ItemPrototypeId,
    ItemStatus,
    ItemType,
    Money,
    StoreId,
)
from equipment.structured_logging.enhanced_logging_config import setup_enhanced_logging  # noqa: E402


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    setup_enhanced_logging(
        {"logging": {"environment": "unit_test", "level": "DEBUG", "disable_logging": True}},
        force_reconfigure=True,
    )


@pytest.fixture()
def make_item() -> Callable[..., Item]:
    counter = {"n": 0}

    def _make_item(
        *,
        name: str | None = None,
        item_type: ItemType = ItemType.WEAPON,
        price: int = 10,
        creator: CharacterId | None = None,
    ) -> Item:
        counter["n"] += 1
        return Item(
            id=ItemId.generate(),
            name=name or f"Obsidian Blade {counter['n']}",
            description="A blade that drinks the lamplight.",
            image_file_path=f"images/items/blade_{counter['n']}.png",
            type=item_type,
            price=Money(price),
            prototype_id=ItemPrototypeId.generate(),
            effects=(ItemEffect("strength", 2),),
            creator_character_id=creator,
        )

    return _make_item


@pytest.fixture()
def generate_items(make_item) -> Callable[..., dict[int, InventoryItem]]:
    def _generate(count: int, status: ItemStatus = ItemStatus.IN_BACKPACK) -> dict[int, InventoryItem]:
        return {slot: InventoryItem(make_item(), status) for slot in range(count)}

    return _generate


@pytest.fixture()
def character_id() -> CharacterId:
    return CharacterId.generate()


@pytest.fixture()
def make_inventory(generate_items, character_id) -> Callable[..., Inventory]:
    def _make_inventory(count: int = 0, money: int = 0, **kwargs) -> Inventory:
        return Inventory(InventoryId.generate(), character_id, generate_items(count), Money(money), **kwargs)

    return _make_inventory


@pytest.fixture()
def make_store(generate_items, character_id) -> Callable[..., Store]:
    def _make_store(count: int = 0, money: int = 0, owner: CharacterId | None = None, **kwargs) -> Store:
        return Store(
            StoreId.generate(),
            owner or character_id,
            generate_items(count, ItemStatus.IN_STORE),
            Money(money),
            **kwargs,
        )

    return _make_store
