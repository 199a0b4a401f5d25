"""Creation of the items that spawn onto the field."""

from __future__ import annotations

from .items import GravitationalMountableItem, ItemType
from .kits import Adrenaline, Bandage, Medkit
from .weapons import Bomb, Knife, Rifle, Sniper

_CONSTRUCTORS: dict[ItemType, type[GravitationalMountableItem]] = {
    ItemType.KNIFE: Knife,
    ItemType.BOMB: Bomb,
    ItemType.RIFLE: Rifle,
    ItemType.SNIPER: Sniper,
    ItemType.BANDAGE: Bandage,
    ItemType.MEDKIT: Medkit,
    ItemType.ADRENALINE: Adrenaline,
}


def create_item(item_type: ItemType) -> GravitationalMountableItem:
    """Build a new, free-standing item of the given type."""
    try:
        constructor = _CONSTRUCTORS[item_type]
    except (KeyError, TypeError):
        raise ValueError(f"unknown item type: {item_type!r}") from None
    return constructor()


def item_types() -> list[ItemType]:
    """Every spawnable item type, in spawn-table order."""
    return list(_CONSTRUCTORS)