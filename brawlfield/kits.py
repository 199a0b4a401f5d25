"""Healing kits that fall onto the field and are consumed when picked up."""

from __future__ import annotations

from .items import GravitationalMountableItem, Item

ADRENALINE_PIXMAP = "Items/Kits/Adrenaline.png"
BANDAGE_PIXMAP = "Items/Kits/Bandage.png"
MEDKIT_PIXMAP = "Items/Kits/Medkit.png"

KIT_SIZE = (30.0, 30.0)


class Adrenaline(GravitationalMountableItem):
    """Heals over time and speeds up the character who takes it."""

    def __init__(self, parent: Item | None = None) -> None:
        super().__init__(parent, ADRENALINE_PIXMAP, KIT_SIZE)


class Bandage(GravitationalMountableItem):
    """Restores part of a character's health."""

    def __init__(self, parent: Item | None = None) -> None:
        super().__init__(parent, BANDAGE_PIXMAP, KIT_SIZE)


class Medkit(GravitationalMountableItem):
    """Restores a character's health fully."""

    def __init__(self, parent: Item | None = None) -> None:
        super().__init__(parent, MEDKIT_PIXMAP, KIT_SIZE)