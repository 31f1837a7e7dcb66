"""Item status: where an item is held and how."""

from __future__ import annotations

from enum import Enum


class ItemStatus(str, Enum):
    """Location/state of an item inside a container."""

    IN_BACKPACK = "in_backpack"
    IN_STORE = "in_store"
    EQUIPPED = "equipped"

    @classmethod
    def in_backpack(cls) -> ItemStatus:
        return cls.IN_BACKPACK

    @classmethod
    def in_store(cls) -> ItemStatus:
        return cls.IN_STORE

    @classmethod
    def equipped(cls) -> ItemStatus:
        return cls.EQUIPPED

    def is_in_backpack(self) -> bool:
        return self is ItemStatus.IN_BACKPACK

    def is_in_store(self) -> bool:
        return self is ItemStatus.IN_STORE

    def is_equipped(self) -> bool:
        return self is ItemStatus.EQUIPPED

    def can_transition_to(self, target: ItemStatus) -> bool:
        """Equipping is only reachable from the backpack, never straight from a store."""
        return target in _ALLOWED_TRANSITIONS[self]


_ALLOWED_TRANSITIONS: dict[ItemStatus, frozenset[ItemStatus]] = {
    ItemStatus.IN_BACKPACK: frozenset({ItemStatus.EQUIPPED, ItemStatus.IN_STORE}),
    ItemStatus.EQUIPPED: frozenset({ItemStatus.IN_BACKPACK}),
    ItemStatus.IN_STORE: frozenset({ItemStatus.IN_BACKPACK}),
}


__all__ = ["ItemStatus"]
