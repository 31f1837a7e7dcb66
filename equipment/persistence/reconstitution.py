"""
Reconstitution factories: persisted records to domain aggregates and back.

Every inconsistency found in stored data (schema violations, duplicate slot
numbers, unknown statuses or item types) surfaces as the domain
ValidationError, so callers deal with a single error taxonomy.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar, cast

from pydantic import ValidationError as PydanticValidationError

from ..config.models import InventoryConfig
from ..domain.entities import Container, Inventory, Store
from ..domain.exceptions import ItemTypeMismatchError, ValidationError
from ..domain.value_objects import (
    CharacterId,
    Identifier,
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
from ..structured_logging.enhanced_logging_config import get_logger
from .records import ContainerRecord, InventoryItemRecord, ItemEffectRecord

logger = get_logger(__name__)


def parse_container_record(payload: ContainerRecord | Mapping[str, Any]) -> ContainerRecord:
    """Validate a raw payload into a ContainerRecord."""
    if isinstance(payload, ContainerRecord):
        return payload
    try:
        return ContainerRecord.model_validate(payload)
    except PydanticValidationError as exc:
        errors = exc.errors(include_url=False)
        logger.warning("Invalid persisted container record", errors=errors)
        first = errors[0] if errors else {}
        field_path = ".".join(str(part) for part in first.get("loc", ())) or None
        raise ValidationError(
            f"Persisted container record is invalid: {first.get('msg', 'unknown error')}",
            field=field_path,
            details={"errors": [dict(error) for error in errors]},
        ) from exc


def _parse_enum(enum_type: type, raw: str, field_name: str) -> Any:
    try:
        return enum_type(raw)
    except ValueError:
        raise ValidationError(f"Unknown {field_name} '{raw}'", field=field_name, value=raw) from None


class InventoryItemReconstitutionFactory:  # pylint: disable=too-few-public-methods  # Reason: Factory class with focused responsibility
    """Maps stored item records to InventoryItems."""

    def reconstitute(self, record: InventoryItemRecord) -> InventoryItem:
        if not isinstance(record, InventoryItemRecord):
            raise ItemTypeMismatchError(getattr(record, "slot_number", "?"), type(record).__name__)

        creator = record.creator_character_id
        item = Item(
            id=ItemId.from_string(record.id),
            name=record.name,
            description=record.description,
            image_file_path=record.image_file_path,
            type=_parse_enum(ItemType, record.type, "item_type"),
            price=Money(record.price),
            prototype_id=ItemPrototypeId.from_string(record.prototype_id),
            effects=tuple(ItemEffect(effect.effect_type, effect.magnitude) for effect in record.effects),
            creator_character_id=CharacterId.from_string(creator) if creator is not None else None,
        )
        return InventoryItem(item, _parse_enum(ItemStatus, record.status, "status"))

    @staticmethod
    def dehydrate(slot_number: int, inventory_item: InventoryItem) -> InventoryItemRecord:
        item = inventory_item.item
        return InventoryItemRecord(
            id=str(item.id),
            name=item.name,
            description=item.description,
            image_file_path=item.image_file_path,
            type=item.type.value,
            price=item.price.value(),
            prototype_id=str(item.prototype_id),
            creator_character_id=str(item.creator_character_id) if item.creator_character_id else None,
            effects=[ItemEffectRecord(effect_type=e.effect_type, magnitude=e.magnitude) for e in item.effects],
            slot_number=slot_number,
            status=inventory_item.status.value,
        )


class ContainerReconstitutionFactory:
    """Shared reconstitution for container aggregates."""

    CONTAINER_TYPE: ClassVar[type[Container]] = Container
    ID_TYPE: ClassVar[type[Identifier]] = Identifier

    def __init__(
        self,
        inventory_item_factory: InventoryItemReconstitutionFactory | None = None,
        number_of_slots: int | None = None,
    ):
        self._inventory_item_factory = inventory_item_factory or InventoryItemReconstitutionFactory()
        self._number_of_slots = number_of_slots

    def reconstitute(self, payload: ContainerRecord | Mapping[str, Any]) -> Container:
        record = parse_container_record(payload)

        items: dict[int, InventoryItem] = {}
        for item_record in record.items:
            if item_record.slot_number in items:
                raise ValidationError(
                    f"Slot {item_record.slot_number} is used more than once",
                    field="slot_number",
                    value=item_record.slot_number,
                )
            items[item_record.slot_number] = self._inventory_item_factory.reconstitute(item_record)

        return self.CONTAINER_TYPE(
            self.ID_TYPE.from_string(record.id),
            CharacterId.from_string(record.owner_id),
            items,
            Money(record.money),
            number_of_slots=self._number_of_slots,
        )

    def dehydrate(self, container: Container) -> ContainerRecord:
        return ContainerRecord(
            id=str(container.id),
            owner_id=str(container.owner_id),
            money=container.get_money().value(),
            items=[
                self._inventory_item_factory.dehydrate(slot_number, inventory_item)
                for slot_number, inventory_item in container.get_items().items()
            ],
        )


class InventoryReconstitutionFactory(ContainerReconstitutionFactory):
    """Rebuilds character inventories."""

    CONTAINER_TYPE: ClassVar[type[Container]] = Inventory
    ID_TYPE: ClassVar[type[Identifier]] = InventoryId

    @classmethod
    def from_config(cls, config: InventoryConfig) -> InventoryReconstitutionFactory:
        return cls(number_of_slots=config.number_of_slots)

    def reconstitute(self, payload: ContainerRecord | Mapping[str, Any]) -> Inventory:
        return cast(Inventory, super().reconstitute(payload))


class StoreReconstitutionFactory(ContainerReconstitutionFactory):
    """Rebuilds character stores."""

    CONTAINER_TYPE: ClassVar[type[Container]] = Store
    ID_TYPE: ClassVar[type[Identifier]] = StoreId

    @classmethod
    def from_config(cls, config: InventoryConfig) -> StoreReconstitutionFactory:
        return cls(number_of_slots=config.store_number_of_slots)

    def reconstitute(self, payload: ContainerRecord | Mapping[str, Any]) -> Store:
        return cast(Store, super().reconstitute(payload))


__all__ = [
    "ContainerReconstitutionFactory",
    "InventoryItemReconstitutionFactory",
    "InventoryReconstitutionFactory",
    "StoreReconstitutionFactory",
    "parse_container_record",
]
