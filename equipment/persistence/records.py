"""
Persisted shapes of containers and their items.

These pydantic models describe what storage hands back, before any domain
rule has been applied. Statuses and item types stay plain strings here; the
reconstitution factories translate them and reject unknown values.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ItemEffectRecord(BaseModel):
    """Stored gameplay effect."""

    model_config = ConfigDict(extra="forbid")

    effect_type: str = Field(min_length=1, max_length=120)
    magnitude: int = 0


class ItemRecord(BaseModel):
    """Stored item description."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1)
    name: str = Field(min_length=1, max_length=120)
    description: str = Field(default="", max_length=2048)
    image_file_path: str = ""
    type: str
    price: int = Field(ge=0)
    prototype_id: str = Field(min_length=1)
    creator_character_id: str | None = None
    effects: list[ItemEffectRecord] = Field(default_factory=list)


class InventoryItemRecord(ItemRecord):
    """Stored item together with the slot it occupies and its status."""

    slot_number: int = Field(ge=0)
    status: str


class ContainerRecord(BaseModel):
    """Stored inventory or store."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1)
    owner_id: str = Field(min_length=1)
    money: int = Field(default=0, ge=0)
    items: list[InventoryItemRecord] = Field(default_factory=list)


__all__ = ["ContainerRecord", "InventoryItemRecord", "ItemEffectRecord", "ItemRecord"]
