"""
Domain entities for the equipment subsystem.

Entities are objects with identity and lifecycle. Here those are the two
container aggregates, Inventory and Store, built on the shared Container
discipline of capacity, permitted statuses, and a non-negative balance.

Entities are framework-agnostic and perform no I/O; the application layer
loads them, invokes an operation, and persists the result.

Example:
    from equipment.domain.entities import Inventory

    inventory = Inventory(inventory_id, character_id, {}, Money(5))
    inventory.add(sword)
    inventory.equip(sword.id)
"""

from .container import NUMBER_OF_SLOTS, Container
from .inventory import Inventory
from .store import Store

__all__ = ["Container", "Inventory", "NUMBER_OF_SLOTS", "Store"]
