"""The two playable fighters, blue and red."""

from __future__ import annotations

from .character import Character
from .items import Item


class Link(Character):
    """The blue fighter."""

    STAND = "Items/Players/NPC_Blue.png"
    CROUCH = "Items/Players/NPC_Blue_Crouch.png"
    FIST = "Items/Players/NPC_Blue_Fist.png"

    def __init__(self, parent: Item | None = None) -> None:
        super().__init__(parent, self.STAND)

    def update_crouch_pixmap(self, crouch: bool) -> None:
        super().update_crouch_pixmap(crouch)
        self.pixmap_path = self.CROUCH if crouch else self.STAND

    def update_fist_pixmap(self, fist: bool) -> None:
        super().update_fist_pixmap(fist)
        self.pixmap_path = self.FIST if fist else self.STAND


class Enemy(Character):
    """The red fighter."""

    STAND = "Items/Players/NPC_Red.png"
    CROUCH = "Items/Players/NPC_Red_Crouch.png"
    FIST = "Items/Players/NPC_Red_Fist.png"

    def __init__(self, parent: Item | None = None) -> None:
        super().__init__(parent, self.STAND)

    def update_crouch_pixmap(self, crouch: bool) -> None:
        super().update_crouch_pixmap(crouch)
        self.pixmap_path = self.CROUCH if crouch else self.STAND

    def update_fist_pixmap(self, fist: bool) -> None:
        super().update_fist_pixmap(fist)
        self.pixmap_path = self.FIST if fist else self.STAND