"""
Persistence adapter for the equipment subsystem.

Translates stored container records into domain aggregates and back, and
provides repository implementations of the domain repository protocols.
"""

from .reconstitution import (
    ContainerReconstitutionFactory,
    InventoryItemReconstitutionFactory,
    InventoryReconstitutionFactory,
    StoreReconstitutionFactory,
    parse_container_record,
)
from .records import ContainerRecord, InventoryItemRecord, ItemEffectRecord, ItemRecord

__all__ = [
    "ContainerRecord",
    "ContainerReconstitutionFactory",
    "InventoryItemRecord",
    "InventoryItemReconstitutionFactory",
    "InventoryReconstitutionFactory",
    "ItemEffectRecord",
    "ItemRecord",
    "StoreReconstitutionFactory",
    "parse_container_record",
]
