"""Solid platforms of various ground types that characters stand on."""

from __future__ import annotations

from typing import ClassVar

from .items import Item, Rect


class Platform(Item):
    """A solid rectangle with a settable size and an optional name."""

    solid = True

    def __init__(self, parent: Item | None = None, pixmap_path: str = "") -> None:
        super().__init__(parent, pixmap_path)
        self.width = 0.0
        self.height = 0.0
        self.name = ""

    def bounding_rect(self) -> Rect:
        return Rect(0.0, 0.0, self.width, self.height)


class AirPlatform(Platform):
    """An invisible platform, also used for walls; base of the textured ones."""

    texture: ClassVar[str] = ""

    def __init__(self, parent: Item | None = None) -> None:
        super().__init__(parent, "")

    def set_size(self, width: float, height: float) -> None:
        self.width = width
        self.height = height


class GrassPlatform(AirPlatform):
    """Grass ground; crouching on it hides a character."""

    texture = "Items/Platforms/GrassPlatform.png"

    def __init__(self, parent: Item | None = None) -> None:
        super().__init__(parent)


class IcePlatform(AirPlatform):
    """Ice ground; characters move faster on it."""

    texture = "Items/Platforms/IcePlatform.png"

    def __init__(self, parent: Item | None = None) -> None:
        super().__init__(parent)


class LandPlatform(AirPlatform):
    """Plain land ground."""

    texture = "Items/Platforms/LandPlatform.png"

    def __init__(self, parent: Item | None = None) -> None:
        super().__init__(parent)