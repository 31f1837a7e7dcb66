"""
Domain services for the equipment subsystem.

Domain services contain business logic that doesn't naturally belong to any
single entity. Transfers touch two container aggregates, so they live here
and keep each aggregate's invariants local to that aggregate.

Domain services should:
- Be stateless
- Focus on business logic, not infrastructure
- Leave locking and ordering of the aggregates to the application layer

Example:
    from equipment.domain.services import move_item

    move_item(inventory, store, sword.id, ItemStatus.in_store())
"""

from .transfer import buy_item, move_item, move_money

__all__ = ["buy_item", "move_item", "move_money"]
