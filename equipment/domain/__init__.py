"""
Domain layer for the equipment subsystem.

This package contains the core business rules of character equipment:
fixed-capacity containers holding items and a currency balance, item status
transitions, and transfers between containers. It performs no I/O; the
application layer loads aggregates, calls into the domain, and persists the
results.

Domain Structure:
- entities/ - Container aggregates (Inventory, Store)
- value_objects/ - Identifiers, Money, ItemStatus, Item, InventoryItem
- services/ - Transfers and trades spanning two containers
- repositories/ - Repository interfaces (implemented by persistence)
- exceptions/ - Domain error taxonomy
"""

__all__ = []
