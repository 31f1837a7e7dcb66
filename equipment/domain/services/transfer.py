"""Cross-container transfers of items and money.

These are the only operations touching two aggregates at once, so they live
here rather than on either container. Every check that can fail runs before
the source is mutated: an item is never removed from one container without
landing in the other, and money never leaves without arriving.
"""

from __future__ import annotations

from ...structured_logging.enhanced_logging_config import get_logger
from ..entities import Container, Inventory, Store
from ..exceptions import InsufficientFundsError, StateTransitionError, ValidationError
from ..value_objects import InventoryItem, ItemId, ItemStatus, Money

logger = get_logger(__name__)


def move_item(source: Container, destination: Container, item_id: ItemId, new_status: ItemStatus) -> int:
    """
    Move one item between containers, re-wrapping it with ``new_status``.

    Args:
        source: Container currently holding the item.
        destination: Container receiving the item.
        item_id: Identity of the item to move.
        new_status: Status the item carries in the destination.

    Returns:
        Slot number assigned in the destination.

    Raises:
        NotFoundError: If the source does not hold the item.
        StateTransitionError: If the item is equipped or the status change is illegal.
        ValidationError: If the destination does not accept ``new_status``.
        CapacityExceededError: If the destination is full.
    """

    if source is destination:
        raise ValidationError("Source and destination must be different containers", field="destination")

    current = source.find(item_id)
    if current.status.is_equipped():
        raise StateTransitionError(
            str(item_id), current.status.value, new_status.value, reason="un-equip the item before moving it"
        )
    moved = current if current.status is new_status else current.with_status(new_status)

    destination.ensure_status_allowed(new_status)
    if destination.contains(item_id):
        raise ValidationError("Destination already holds this item", field="item", value=item_id)
    destination.ensure_free_slot()

    source.remove(item_id)
    slot_number = destination.put(moved)

    logger.debug(
        "Item moved between containers",
        item_id=str(item_id),
        source_id=str(source.id),
        destination_id=str(destination.id),
        status=new_status.value,
        slot_number=slot_number,
    )
    return slot_number


def move_money(source: Container, destination: Container, amount: Money) -> None:
    """
    Move money between containers.

    A failed withdrawal leaves both balances untouched; the deposit that
    follows cannot fail.
    """

    if source is destination:
        raise ValidationError("Source and destination must be different containers", field="destination")

    source.take_money_out(amount)
    destination.put_money_in(amount)

    logger.debug(
        "Money moved between containers",
        amount=amount.value(),
        source_id=str(source.id),
        destination_id=str(destination.id),
    )


def buy_item(buyer: Inventory, seller: Store, item_id: ItemId) -> InventoryItem:
    """
    Buy a listed item from a store into an inventory at its listed price.

    The listing and the buyer's room and funds are checked before any
    money or item changes hands.
    """

    listing = seller.find(item_id)
    price = listing.item.price

    if buyer.contains(item_id):
        raise ValidationError("Buyer already holds this item", field="item", value=item_id)
    buyer.ensure_free_slot()
    if not buyer.money.covers(price):
        raise InsufficientFundsError(available=buyer.money.value(), requested=price.value())

    move_money(buyer, seller, price)
    move_item(seller, buyer, item_id, ItemStatus.IN_BACKPACK)

    logger.debug(
        "Item bought from store",
        item_id=str(item_id),
        price=price.value(),
        buyer_inventory_id=str(buyer.id),
        seller_store_id=str(seller.id),
    )
    return buyer.find(item_id)


__all__ = ["move_item", "move_money", "buy_item"]
